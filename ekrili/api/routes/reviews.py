from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ekrili.core.deps import get_current_user, get_storage
from ekrili.models.review import Review
from ekrili.models.user import User
from ekrili.schemas.review import ReviewCreate, ReviewIn
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.get("/property/{property_id}", response_model=List[Review])
def list_property_reviews(property_id: int, storage: MemoryStorage = Depends(get_storage)):
    return storage.list_reviews_by_property(property_id)


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(
    review_in: ReviewIn,
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    """Review a stay; only the tenant of the referenced booking may do so"""
    booking = storage.get_booking(review_in.booking_id)
    if not booking or booking.property_id != review_in.property_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    if booking.tenant_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the tenant can review this booking")

    return storage.create_review(ReviewCreate(**review_in.model_dump(), tenant_id=current_user.id))
