"""
Property Model
A rentable listing: house, apartment, studio, equipment or student housing
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class PropertyCategory(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    STUDIO = "studio"
    EQUIPMENT = "equipment"
    STUDENT = "student"


class Property(BaseModel):
    id: int
    owner_id: int

    # Listing
    title: str
    description: str
    category: PropertyCategory
    property_type: str  # Villa, Appartement, Studio, ...

    # Location
    region: str
    location: str
    gps_coordinates: Optional[str] = None

    # Pricing (TND, decimal strings)
    price_per_night: str
    price_per_month: Optional[str] = None

    # Details
    bedrooms: int = 0
    bathrooms: int = 0
    max_guests: int
    is_furnished: bool = False
    amenities: List[str] = []
    images: List[str] = []

    # Flags
    is_verified: bool = False
    is_instant: bool = False
    is_student_friendly: bool = False
    is_active: bool = True

    # Stay rules, in nights
    min_stay: int = 1
    max_stay: int = 365
    house_rules: Optional[str] = None

    rating: str = "0.0"
    review_count: int = 0
    created_at: datetime

    @property
    def nightly_price(self) -> Decimal:
        return Decimal(self.price_per_night)
