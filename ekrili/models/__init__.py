from ekrili.models.user import User, UserRole, Language
from ekrili.models.property import Property, PropertyCategory
from ekrili.models.booking import Booking, BookingStatus
from ekrili.models.review import Review
from ekrili.models.message import Message
from ekrili.models.favorite import Favorite

__all__ = [
    "User",
    "UserRole",
    "Language",
    "Property",
    "PropertyCategory",
    "Booking",
    "BookingStatus",
    "Review",
    "Message",
    "Favorite",
]
