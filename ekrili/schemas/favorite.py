from pydantic import BaseModel


class FavoriteIn(BaseModel):
    property_id: int


class FavoriteCreate(FavoriteIn):
    user_id: int


class FavoriteStatus(BaseModel):
    property_id: int
    is_favorite: bool
