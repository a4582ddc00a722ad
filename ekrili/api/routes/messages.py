from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ekrili.core.deps import get_current_user, get_storage
from ekrili.models.message import Message
from ekrili.models.user import User
from ekrili.schemas.message import MessageCreate, MessageIn
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.get("/{user_id}", response_model=List[Message])
def get_conversation(
    user_id: int,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Messages exchanged between the current user and `user_id`, oldest first"""
    return storage.list_messages_between_users(current_user.id, user_id)


@router.post("", response_model=Message, status_code=status.HTTP_201_CREATED)
def send_message(
    message_in: MessageIn,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    if not storage.get_user(message_in.receiver_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipient not found")

    return storage.create_message(MessageCreate(**message_in.model_dump(), sender_id=current_user.id))


@router.post("/{message_id}/read")
def mark_as_read(
    message_id: int,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Mark a received message as read"""
    message = storage.get_message(message_id)
    if not message:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    if message.receiver_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the recipient can mark a message as read")

    return {"success": storage.mark_message_as_read(message_id)}
