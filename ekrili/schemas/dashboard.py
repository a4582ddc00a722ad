from pydantic import BaseModel
from typing import Dict


class StatsOverview(BaseModel):
    total_properties: int
    properties_by_category: Dict[str, int]
    properties_by_region: Dict[str, int]


class OwnerDashboard(BaseModel):
    total_revenue: str
    active_properties: int
    total_properties: int
    total_bookings: int
    pending_bookings: int
    average_rating: str


class TenantDashboard(BaseModel):
    total_spent: str
    total_bookings: int
    upcoming_bookings: int
    favorites_count: int
    member_since: int
