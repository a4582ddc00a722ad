import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ekrili.core.deps import get_current_user, get_storage
from ekrili.models.booking import Booking, BookingStatus
from ekrili.models.user import User
from ekrili.schemas.booking import BookingCreate, BookingIn, BookingStatusUpdate
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_in: BookingIn,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Request a booking as the current user"""
    if not storage.get_property(booking_in.property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

    return storage.create_booking(
        BookingCreate(**booking_in.model_dump(), tenant_id=current_user.id)
    )


@router.get("/tenant/{tenant_id}", response_model=List[Booking])
def list_tenant_bookings(tenant_id: int, storage: MemoryStorage = Depends(get_storage)):
    return storage.list_bookings_by_tenant(tenant_id)


@router.get("/property/{property_id}", response_model=List[Booking])
def list_property_bookings(property_id: int, storage: MemoryStorage = Depends(get_storage)):
    return storage.list_bookings_by_property(property_id)


@router.patch("/{booking_id}/status", response_model=Booking)
def update_booking_status(
    booking_id: int,
    status_update: BookingStatusUpdate,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """
    Change a booking's status. Allowed for the tenant and for the owner of the
    booked property; no transition rules apply.
    """
    booking = storage.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")

    prop = storage.get_property(booking.property_id)
    is_owner = prop is not None and prop.owner_id == current_user.id
    if booking.tenant_id != current_user.id and not is_owner:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to update this booking")

    logger.info(f"Booking {booking_id}: {BookingStatus(booking.status).value} -> {status_update.status.value}")
    return storage.update_booking(booking_id, {"status": status_update.status})
