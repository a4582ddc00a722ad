import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ekrili.core.deps import get_current_user, get_current_user_optional, get_storage
from ekrili.models.property import Property, PropertyCategory
from ekrili.models.user import User
from ekrili.schemas.property import (
    PropertyCreate, PropertyFilters, PropertyIn, PropertyUpdate, PropertyWithOwner,
)
from ekrili.schemas.user import UserResponse
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter()


def with_owner(prop: Property, storage: MemoryStorage) -> PropertyWithOwner:
    """Attach the public owner profile to a listing, when the owner still exists"""
    owner = storage.get_user(prop.owner_id)
    return PropertyWithOwner(
        **prop.model_dump(),
        owner=UserResponse.model_validate(owner) if owner else None,
    )


def get_owned_property(property_id: int, storage: MemoryStorage, user: User) -> Property:
    prop = storage.get_property(property_id)
    if not prop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    if prop.owner_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not the owner of this property")
    return prop


@router.get("", response_model=List[PropertyWithOwner])
def list_properties(
    category: Optional[PropertyCategory] = None,
    region: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0),
    is_student_friendly: Optional[bool] = Query(None, alias="isStudentFriendly"),
    is_verified: Optional[bool] = Query(None, alias="isVerified"),
    is_instant: Optional[bool] = Query(None, alias="isInstant"),
    storage: MemoryStorage = Depends(get_storage),
):
    """Active listings, filtered, each with its owner"""
    filters = PropertyFilters(
        category=category,
        region=region or None,
        min_price=min_price,
        max_price=max_price,
        is_student_friendly=is_student_friendly,
        is_verified=is_verified,
        is_instant=is_instant,
    )
    return [with_owner(p, storage) for p in storage.list_active_properties(filters)]


@router.get("/owner/{owner_id}", response_model=List[Property])
def list_owner_properties(owner_id: int, storage: MemoryStorage = Depends(get_storage)):
    """All listings of an owner, inactive ones included"""
    return storage.list_all_properties_for_owner(owner_id)


@router.get("/{property_id}", response_model=PropertyWithOwner)
def get_property(
    property_id: int,
    storage: MemoryStorage = Depends(get_storage),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """Get a listing with its owner; `is_favorite` is set for signed-in callers"""
    prop = storage.get_property(property_id)
    if not prop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

    result = with_owner(prop, storage)
    if current_user:
        result.is_favorite = storage.is_favorite(current_user.id, prop.id)
    return result


@router.post("", response_model=Property, status_code=status.HTTP_201_CREATED)
def create_property(
    property_in: PropertyIn,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Publish a listing owned by the current user"""
    return storage.create_property(
        PropertyCreate(**property_in.model_dump(), owner_id=current_user.id)
    )


@router.patch("/{property_id}", response_model=Property)
def update_property(
    property_id: int,
    property_update: PropertyUpdate,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Update one of the current user's listings"""
    prop = get_owned_property(property_id, storage, current_user)
    updates = property_update.model_dump(exclude_unset=True)

    min_stay = updates.get("min_stay", prop.min_stay)
    max_stay = updates.get("max_stay", prop.max_stay)
    if min_stay > max_stay:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"min_stay ({min_stay}) must not exceed max_stay ({max_stay})",
        )

    return storage.update_property(property_id, updates)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    property_id: int,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Delete one of the current user's listings"""
    get_owned_property(property_id, storage, current_user)
    storage.delete_property(property_id)
    return None
