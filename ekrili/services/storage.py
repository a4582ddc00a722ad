"""
Memory Storage
In-process repository for users, properties, bookings, reviews, messages
and favorites. Records live in per-kind dicts keyed by auto-incremented ids.

Lookups of missing records return None and removals of missing records
return False; nothing here raises for an absent id.
"""
from __future__ import annotations

import itertools
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel

from ekrili.models import (
    Booking, BookingStatus, Favorite, Message, Property, Review, User,
)
from ekrili.schemas.booking import BookingCreate
from ekrili.schemas.favorite import FavoriteCreate
from ekrili.schemas.message import MessageCreate
from ekrili.schemas.property import PropertyCreate, PropertyFilters
from ekrili.schemas.review import ReviewCreate
from ekrili.schemas.user import UserCreate

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
Payload = Union[BaseModel, Mapping[str, Any]]


def _as_dict(data: Payload, partial: bool = False) -> Dict[str, Any]:
    """Plain field dict from a schema instance or a mapping."""
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=partial)
    return dict(data)


def _copy(record: Optional[RecordT]) -> Optional[RecordT]:
    return record.model_copy(deep=True) if record is not None else None


# ── MemoryStorage ──────────────────────────────────────────────────────────────

class MemoryStorage:
    def __init__(self, clock: Callable[[], datetime] = datetime.utcnow):
        self._clock = clock

        self._users: Dict[int, User] = {}
        self._properties: Dict[int, Property] = {}
        self._bookings: Dict[int, Booking] = {}
        self._reviews: Dict[int, Review] = {}
        self._messages: Dict[int, Message] = {}
        self._favorites: Dict[int, Favorite] = {}

        self._user_ids = itertools.count(1)
        self._property_ids = itertools.count(1)
        self._booking_ids = itertools.count(1)
        self._review_ids = itertools.count(1)
        self._message_ids = itertools.count(1)
        self._favorite_ids = itertools.count(1)

    # ── Seeding ───────────────────────────────────────────────────────────────

    def load_seed(self, users: Iterable[User] = (), properties: Iterable[Property] = ()) -> None:
        """
        Insert pre-built records with their own ids and move the id counters
        past the highest seeded id.
        """
        for user in users:
            self._users[user.id] = user
        for prop in properties:
            self._properties[prop.id] = prop

        if self._users:
            self._user_ids = itertools.count(max(self._users) + 1)
        if self._properties:
            self._property_ids = itertools.count(max(self._properties) + 1)

        logger.info(
            f"Seeded storage with {len(self._users)} users and {len(self._properties)} properties"
        )

    # ── Users ─────────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> Optional[User]:
        return _copy(self._users.get(user_id))

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Exact, case-sensitive match."""
        for user in self._users.values():
            if user.email == email:
                return _copy(user)
        return None

    def create_user(self, data: Union[UserCreate, Mapping[str, Any]]) -> User:
        """
        Store a new user. The returned record still carries the password hash;
        stripping it is up to the caller.
        """
        user = User(
            **{
                **_as_dict(data),
                "id": next(self._user_ids),
                "is_verified": False,
                "phone_verified": False,
                "created_at": self._clock(),
            }
        )
        self._users[user.id] = user
        logger.debug(f"Created user {user.id}")
        return _copy(user)

    def update_user(self, user_id: int, updates: Payload) -> Optional[User]:
        return self._merge(self._users, user_id, updates)

    # ── Properties ────────────────────────────────────────────────────────────

    def get_property(self, property_id: int) -> Optional[Property]:
        return _copy(self._properties.get(property_id))

    def list_active_properties(self, filters: Optional[PropertyFilters] = None) -> List[Property]:
        """
        Active listings narrowed by `filters` (all conditions ANDed), in
        insertion order. Price bounds are inclusive and compare the parsed
        nightly price.
        """
        properties = [p for p in self._properties.values() if p.is_active]

        if filters is not None:
            if filters.category is not None:
                properties = [p for p in properties if p.category == filters.category]
            if filters.region is not None:
                properties = [p for p in properties if p.region == filters.region]
            if filters.min_price is not None:
                properties = [p for p in properties if p.nightly_price >= filters.min_price]
            if filters.max_price is not None:
                properties = [p for p in properties if p.nightly_price <= filters.max_price]
            if filters.is_student_friendly is not None:
                properties = [p for p in properties if p.is_student_friendly == filters.is_student_friendly]
            if filters.is_verified is not None:
                properties = [p for p in properties if p.is_verified == filters.is_verified]
            if filters.is_instant is not None:
                properties = [p for p in properties if p.is_instant == filters.is_instant]

        return [_copy(p) for p in properties]

    def list_all_properties_for_owner(self, owner_id: int) -> List[Property]:
        """Every listing of the owner, inactive ones included."""
        return [_copy(p) for p in self._properties.values() if p.owner_id == owner_id]

    def create_property(self, data: Union[PropertyCreate, Mapping[str, Any]]) -> Property:
        # Verification and rating are never taken from the caller.
        prop = Property(
            **{
                **_as_dict(data),
                "id": next(self._property_ids),
                "is_verified": False,
                "rating": "0.0",
                "review_count": 0,
                "created_at": self._clock(),
            }
        )
        self._properties[prop.id] = prop
        logger.info(f"Created property {prop.id} for owner {prop.owner_id}")
        return _copy(prop)

    def update_property(self, property_id: int, updates: Payload) -> Optional[Property]:
        return self._merge(self._properties, property_id, updates)

    def delete_property(self, property_id: int) -> bool:
        if self._properties.pop(property_id, None) is None:
            return False
        logger.info(f"Deleted property {property_id}")
        return True

    # ── Bookings ──────────────────────────────────────────────────────────────

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return _copy(self._bookings.get(booking_id))

    def list_bookings_by_property(self, property_id: int) -> List[Booking]:
        return [_copy(b) for b in self._bookings.values() if b.property_id == property_id]

    def list_bookings_by_tenant(self, tenant_id: int) -> List[Booking]:
        return [_copy(b) for b in self._bookings.values() if b.tenant_id == tenant_id]

    def create_booking(self, data: Union[BookingCreate, Mapping[str, Any]]) -> Booking:
        booking = Booking(
            **{
                **_as_dict(data),
                "id": next(self._booking_ids),
                "status": BookingStatus.PENDING,
                "created_at": self._clock(),
            }
        )
        self._bookings[booking.id] = booking
        logger.info(f"Created booking {booking.id} on property {booking.property_id}")
        return _copy(booking)

    def update_booking(self, booking_id: int, updates: Payload) -> Optional[Booking]:
        """Shallow merge; any status may be written."""
        return self._merge(self._bookings, booking_id, updates)

    # ── Reviews ───────────────────────────────────────────────────────────────

    def get_review(self, review_id: int) -> Optional[Review]:
        return _copy(self._reviews.get(review_id))

    def list_reviews_by_property(self, property_id: int) -> List[Review]:
        return [_copy(r) for r in self._reviews.values() if r.property_id == property_id]

    def create_review(self, data: Union[ReviewCreate, Mapping[str, Any]]) -> Review:
        # The parent property's rating and review_count are left untouched.
        review = Review(
            **{
                **_as_dict(data),
                "id": next(self._review_ids),
                "created_at": self._clock(),
            }
        )
        self._reviews[review.id] = review
        return _copy(review)

    # ── Messages ──────────────────────────────────────────────────────────────

    def list_messages_between_users(self, user_a: int, user_b: int) -> List[Message]:
        """Conversation in both directions, oldest first (id breaks timestamp ties)."""
        conversation = [m for m in self._messages.values() if m.involves(user_a, user_b)]
        conversation.sort(key=lambda m: (m.created_at, m.id))
        return [_copy(m) for m in conversation]

    def create_message(self, data: Union[MessageCreate, Mapping[str, Any]]) -> Message:
        message = Message(
            **{
                **_as_dict(data),
                "id": next(self._message_ids),
                "is_read": False,
                "created_at": self._clock(),
            }
        )
        self._messages[message.id] = message
        return _copy(message)

    def get_message(self, message_id: int) -> Optional[Message]:
        return _copy(self._messages.get(message_id))

    def mark_message_as_read(self, message_id: int) -> bool:
        message = self._messages.get(message_id)
        if message is None:
            return False
        message.is_read = True
        return True

    # ── Favorites ─────────────────────────────────────────────────────────────

    def list_favorites_by_user(self, user_id: int) -> List[Favorite]:
        return [_copy(f) for f in self._favorites.values() if f.user_id == user_id]

    def add_favorite(self, data: Union[FavoriteCreate, Mapping[str, Any]]) -> Favorite:
        """No uniqueness check: the same pair can be saved more than once."""
        favorite = Favorite(
            **{
                **_as_dict(data),
                "id": next(self._favorite_ids),
                "created_at": self._clock(),
            }
        )
        self._favorites[favorite.id] = favorite
        return _copy(favorite)

    def remove_favorite(self, user_id: int, property_id: int) -> bool:
        """Remove the first matching favorite only."""
        favorite = self._find_favorite(user_id, property_id)
        if favorite is None:
            return False
        del self._favorites[favorite.id]
        return True

    def is_favorite(self, user_id: int, property_id: int) -> bool:
        return self._find_favorite(user_id, property_id) is not None

    def _find_favorite(self, user_id: int, property_id: int) -> Optional[Favorite]:
        return next(
            (f for f in self._favorites.values() if f.user_id == user_id and f.property_id == property_id),
            None,
        )

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _merge(self, table: Dict[int, RecordT], record_id: int, updates: Payload) -> Optional[RecordT]:
        """
        Shallow-merge `updates` into the stored record, without validation.
        The id is the table key and is never overwritten.
        """
        record = table.get(record_id)
        if record is None:
            return None
        changes = _as_dict(updates, partial=True)
        changes.pop("id", None)
        merged = record.model_copy(update=changes)
        table[record_id] = merged
        return _copy(merged)
