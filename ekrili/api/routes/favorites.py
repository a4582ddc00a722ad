from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ekrili.core.deps import get_current_user, get_storage
from ekrili.models.favorite import Favorite
from ekrili.models.user import User
from ekrili.schemas.favorite import FavoriteCreate, FavoriteIn, FavoriteStatus
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.get("/check/{property_id}", response_model=FavoriteStatus)
def check_favorite(
    property_id: int,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    return FavoriteStatus(
        property_id=property_id,
        is_favorite=storage.is_favorite(current_user.id, property_id),
    )


@router.get("/{user_id}", response_model=List[Favorite])
def list_favorites(user_id: int, storage: MemoryStorage = Depends(get_storage)):
    return storage.list_favorites_by_user(user_id)


@router.post("", response_model=Favorite, status_code=status.HTTP_201_CREATED)
def add_favorite(
    favorite_in: FavoriteIn,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Save a listing; saving it twice stores two favorites"""
    if not storage.get_property(favorite_in.property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

    return storage.add_favorite(FavoriteCreate(**favorite_in.model_dump(), user_id=current_user.id))


@router.delete("/{property_id}")
def remove_favorite(
    property_id: int,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    return {"success": storage.remove_favorite(current_user.id, property_id)}
