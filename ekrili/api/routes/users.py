from fastapi import APIRouter, Depends, HTTPException, status

from ekrili.core.deps import get_current_user, get_storage
from ekrili.models.user import User
from ekrili.schemas.user import UserResponse, UserUpdate
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.patch("/me", response_model=UserResponse)
def update_profile(
    user_update: UserUpdate,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Update the current user's profile"""
    return storage.update_user(current_user.id, user_update.model_dump(exclude_unset=True))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, storage: MemoryStorage = Depends(get_storage)):
    """Public profile of a user"""
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
