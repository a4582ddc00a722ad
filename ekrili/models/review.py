from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class Review(BaseModel):
    id: int
    property_id: int
    tenant_id: int
    booking_id: int
    rating: int  # 1-5
    comment: Optional[str] = None
    photos: List[str] = []
    created_at: datetime
