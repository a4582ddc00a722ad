from ekrili.schemas.user import UserCreate, UserUpdate, UserLogin, UserResponse, Token
from ekrili.schemas.property import (
    PropertyIn, PropertyCreate, PropertyUpdate, PropertyFilters, PropertyWithOwner
)
from ekrili.schemas.booking import BookingIn, BookingCreate, BookingStatusUpdate
from ekrili.schemas.review import ReviewIn, ReviewCreate
from ekrili.schemas.message import MessageIn, MessageCreate
from ekrili.schemas.favorite import FavoriteIn, FavoriteCreate, FavoriteStatus
from ekrili.schemas.dashboard import StatsOverview, OwnerDashboard, TenantDashboard

__all__ = [
    "UserCreate", "UserUpdate", "UserLogin", "UserResponse", "Token",
    "PropertyIn", "PropertyCreate", "PropertyUpdate", "PropertyFilters", "PropertyWithOwner",
    "BookingIn", "BookingCreate", "BookingStatusUpdate",
    "ReviewIn", "ReviewCreate",
    "MessageIn", "MessageCreate",
    "FavoriteIn", "FavoriteCreate", "FavoriteStatus",
    "StatsOverview", "OwnerDashboard", "TenantDashboard",
]
