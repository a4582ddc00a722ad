from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from ekrili.core.deps import get_storage
from ekrili.models.property import Property
from ekrili.services.search_service import SearchService
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.get("", response_model=List[Property])
def search_properties(
    q: Optional[str] = None,
    category: Optional[str] = None,
    region: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0),
    purpose: Optional[str] = None,
    storage: MemoryStorage = Depends(get_storage),
):
    """Text search over active listings, combined with the listing filters"""
    try:
        return SearchService(storage).search(q, category, region, min_price, max_price, purpose)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid search filters")
