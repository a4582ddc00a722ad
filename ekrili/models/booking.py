"""
Booking Model
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class BookingStatus(str, Enum):
    # No transition rules are enforced; any status may follow any other.
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(BaseModel):
    id: int
    property_id: int
    tenant_id: int
    check_in: datetime
    check_out: datetime
    guests: int
    total_price: str
    status: BookingStatus = BookingStatus.PENDING
    message: Optional[str] = None
    created_at: datetime

    @property
    def total_amount(self) -> Decimal:
        return Decimal(self.total_price)
