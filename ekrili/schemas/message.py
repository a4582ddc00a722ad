from pydantic import BaseModel, Field
from typing import Optional


class MessageBase(BaseModel):
    receiver_id: int
    property_id: Optional[int] = None
    content: str = Field(..., min_length=1)


class MessageIn(MessageBase):
    pass


class MessageCreate(MessageBase):
    sender_id: int
