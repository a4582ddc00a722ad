from fastapi import APIRouter, Depends

from ekrili.core.deps import get_storage
from ekrili.schemas.dashboard import StatsOverview
from ekrili.services.dashboard_service import DashboardService
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.get("/overview", response_model=StatsOverview)
def stats_overview(storage: MemoryStorage = Depends(get_storage)):
    """Home page counters over active listings"""
    return DashboardService(storage).overview()
