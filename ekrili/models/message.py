from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Message(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    property_id: Optional[int] = None
    content: str
    is_read: bool = False
    created_at: datetime

    def involves(self, user_a: int, user_b: int) -> bool:
        """True when the message was exchanged between the two users, either direction"""
        return (
            (self.sender_id == user_a and self.receiver_id == user_b)
            or (self.sender_id == user_b and self.receiver_id == user_a)
        )
