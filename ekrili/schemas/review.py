from pydantic import BaseModel, Field
from typing import Optional, List


class ReviewBase(BaseModel):
    property_id: int
    booking_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    photos: List[str] = []


class ReviewIn(ReviewBase):
    pass


class ReviewCreate(ReviewBase):
    tenant_id: int
