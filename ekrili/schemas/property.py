from pydantic import BaseModel, Field, field_validator, model_validator
from decimal import Decimal
from typing import Optional, List

from ekrili.models.property import Property, PropertyCategory
from ekrili.schemas.fields import to_decimal_string
from ekrili.schemas.user import UserResponse


class PropertyBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str
    category: PropertyCategory
    property_type: str
    region: str
    location: str
    gps_coordinates: Optional[str] = None
    price_per_night: str
    price_per_month: Optional[str] = None
    bedrooms: int = Field(0, ge=0)
    bathrooms: int = Field(0, ge=0)
    max_guests: int = Field(..., ge=0)
    is_furnished: bool = False
    amenities: List[str] = []
    images: List[str] = []
    is_instant: bool = False
    is_student_friendly: bool = False
    min_stay: int = Field(1, ge=1)
    max_stay: int = Field(365, ge=1)
    house_rules: Optional[str] = None
    is_active: bool = True

    @field_validator("price_per_night", "price_per_month", mode="before")
    @classmethod
    def normalise_price(cls, v):
        if v is None:
            return v
        return to_decimal_string(v)

    @model_validator(mode="after")
    def check_stay_range(self):
        if self.min_stay > self.max_stay:
            raise ValueError("min_stay must not exceed max_stay")
        return self


class PropertyIn(PropertyBase):
    """Listing payload sent by an owner; the owner comes from the token"""
    pass


class PropertyCreate(PropertyBase):
    owner_id: int


class PropertyUpdate(BaseModel):
    """
    Partial listing update. Fields left out are kept; an explicit null is only
    accepted for the optional columns.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[PropertyCategory] = None
    property_type: Optional[str] = None
    region: Optional[str] = None
    location: Optional[str] = None
    gps_coordinates: Optional[str] = None
    price_per_night: Optional[str] = None
    price_per_month: Optional[str] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    max_guests: Optional[int] = Field(None, ge=0)
    is_furnished: Optional[bool] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    is_instant: Optional[bool] = None
    is_student_friendly: Optional[bool] = None
    min_stay: Optional[int] = Field(None, ge=1)
    max_stay: Optional[int] = Field(None, ge=1)
    house_rules: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("price_per_night", "price_per_month", mode="before")
    @classmethod
    def normalise_price(cls, v):
        if v is None:
            return v
        return to_decimal_string(v)

    @field_validator(
        "title", "description", "category", "property_type", "region", "location",
        "price_per_night", "bedrooms", "bathrooms", "max_guests", "is_furnished",
        "amenities", "images", "is_instant", "is_student_friendly", "min_stay",
        "max_stay", "is_active",
    )
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @model_validator(mode="after")
    def check_stay_range(self):
        if self.min_stay is not None and self.max_stay is not None and self.min_stay > self.max_stay:
            raise ValueError("min_stay must not exceed max_stay")
        return self


class PropertyFilters(BaseModel):
    """
    Listing filters. A field left at None is not applied, so
    `is_verified=False` really selects unverified listings.
    """
    category: Optional[PropertyCategory] = None
    region: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    is_student_friendly: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_instant: Optional[bool] = None


class PropertyWithOwner(Property):
    owner: Optional[UserResponse] = None
    is_favorite: Optional[bool] = None
