from ekrili.services.storage import MemoryStorage
from ekrili.services.seed import seed_demo_data
from ekrili.services.search_service import SearchService
from ekrili.services.dashboard_service import DashboardService

__all__ = [
    "MemoryStorage",
    "seed_demo_data",
    "SearchService",
    "DashboardService",
]
