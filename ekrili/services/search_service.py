"""
Search Service
Free-text search and trip-purpose shortcuts on top of the active listing filters.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from ekrili.models import Property, PropertyCategory
from ekrili.schemas.property import PropertyFilters
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

# Category value sent by the search form when no category is chosen.
ANY_CATEGORY = "both"


def _matches_text(prop: Property, query: str) -> bool:
    return (
        query in prop.title.lower()
        or query in prop.description.lower()
        or query in prop.location.lower()
    )


class SearchService:
    def __init__(self, storage: MemoryStorage):
        self.storage = storage

    def build_filters(
        self,
        category: Optional[str] = None,
        region: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        purpose: Optional[str] = None,
    ) -> PropertyFilters:
        """
        Translate search-form fields into listing filters.

        Purpose "student" restricts to student-friendly listings; purpose
        "tourism" forces the house category. Other purposes add nothing.
        """
        filters = PropertyFilters(
            category=category if category and category != ANY_CATEGORY else None,
            region=region or None,
            min_price=min_price,
            max_price=max_price,
        )
        if purpose == "student":
            filters.is_student_friendly = True
        elif purpose == "tourism":
            filters.category = PropertyCategory.HOUSE
        return filters

    def search(
        self,
        q: Optional[str] = None,
        category: Optional[str] = None,
        region: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        purpose: Optional[str] = None,
    ) -> List[Property]:
        filters = self.build_filters(category, region, min_price, max_price, purpose)
        properties = self.storage.list_active_properties(filters)

        if q:
            query = q.lower()
            properties = [p for p in properties if _matches_text(p, query)]

        logger.debug(f"Search q={q!r} purpose={purpose!r} -> {len(properties)} results")
        return properties
