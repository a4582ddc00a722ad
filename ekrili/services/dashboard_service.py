"""
Dashboard Service
Overview counters for the home page and the owner/tenant dashboard figures.
"""
from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, List

from ekrili.models import BookingStatus, PropertyCategory, User
from ekrili.schemas.dashboard import OwnerDashboard, StatsOverview, TenantDashboard
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

# Regions highlighted on the home page.
FEATURED_REGIONS: List[str] = ["Tunis", "Sousse", "Sfax", "Djerba"]


def _money(amount: Decimal) -> str:
    return f"{amount:.2f}"


class DashboardService:
    def __init__(self, storage: MemoryStorage, clock: Callable[[], datetime] = datetime.utcnow):
        self.storage = storage
        self.clock = clock

    def overview(self) -> StatsOverview:
        """Counts over active listings, by category and by featured region."""
        properties = self.storage.list_active_properties()

        by_category: Dict[str, int] = {c.value: 0 for c in PropertyCategory}
        by_region: Dict[str, int] = {r: 0 for r in FEATURED_REGIONS}
        for prop in properties:
            by_category[PropertyCategory(prop.category).value] += 1
            if prop.region in by_region:
                by_region[prop.region] += 1

        return StatsOverview(
            total_properties=len(properties),
            properties_by_category=by_category,
            properties_by_region=by_region,
        )

    def owner_summary(self, owner: User) -> OwnerDashboard:
        """
        Revenue and activity across all of the owner's listings.

        Revenue sums every booking that was not cancelled; the average rating
        is the plain mean of the listings' ratings (0.0 with no listings).
        """
        properties = self.storage.list_all_properties_for_owner(owner.id)
        bookings = [
            booking
            for prop in properties
            for booking in self.storage.list_bookings_by_property(prop.id)
        ]

        revenue = sum(
            (b.total_amount for b in bookings if b.status != BookingStatus.CANCELLED),
            Decimal("0"),
        )
        if properties:
            average = sum((Decimal(p.rating) for p in properties), Decimal("0")) / len(properties)
        else:
            average = Decimal("0")

        return OwnerDashboard(
            total_revenue=_money(revenue),
            active_properties=sum(1 for p in properties if p.is_active),
            total_properties=len(properties),
            total_bookings=len(bookings),
            pending_bookings=sum(1 for b in bookings if b.status == BookingStatus.PENDING),
            average_rating=f"{average:.1f}",
        )

    def tenant_summary(self, tenant: User) -> TenantDashboard:
        bookings = self.storage.list_bookings_by_tenant(tenant.id)
        now = self.clock()

        spent = sum(
            (b.total_amount for b in bookings if b.status != BookingStatus.CANCELLED),
            Decimal("0"),
        )
        upcoming = sum(
            1 for b in bookings
            if b.check_in > now and b.status in (BookingStatus.PENDING, BookingStatus.CONFIRMED)
        )

        return TenantDashboard(
            total_spent=_money(spent),
            total_bookings=len(bookings),
            upcoming_bookings=upcoming,
            favorites_count=len(self.storage.list_favorites_by_user(tenant.id)),
            member_since=tenant.created_at.year,
        )
