from datetime import datetime

from pydantic import BaseModel


class Favorite(BaseModel):
    id: int
    user_id: int
    property_id: int
    created_at: datetime
