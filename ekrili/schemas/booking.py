from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime, timezone
from typing import Optional

from ekrili.models.booking import BookingStatus
from ekrili.schemas.fields import to_decimal_string


class BookingBase(BaseModel):
    property_id: int
    check_in: datetime
    check_out: datetime
    guests: int = Field(..., ge=1)
    total_price: str
    message: Optional[str] = None

    @field_validator("check_in", "check_out")
    @classmethod
    def as_naive_utc(cls, v: datetime) -> datetime:
        # Stored timestamps are naive UTC.
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @field_validator("total_price", mode="before")
    @classmethod
    def normalise_total(cls, v):
        return to_decimal_string(v)

    @model_validator(mode="after")
    def check_dates(self):
        if self.check_out <= self.check_in:
            raise ValueError("check_out must be after check_in")
        return self


class BookingIn(BookingBase):
    pass


class BookingCreate(BookingBase):
    tenant_id: int


class BookingStatusUpdate(BaseModel):
    status: BookingStatus
