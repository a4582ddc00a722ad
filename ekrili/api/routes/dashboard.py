from fastapi import APIRouter, Depends

from ekrili.core.deps import get_current_user, get_storage, require_owner
from ekrili.models.user import User
from ekrili.schemas.dashboard import OwnerDashboard, TenantDashboard
from ekrili.services.dashboard_service import DashboardService
from ekrili.services.storage import MemoryStorage

router = APIRouter()


@router.get("/owner", response_model=OwnerDashboard)
def owner_dashboard(
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(require_owner)
):
    return DashboardService(storage).owner_summary(current_user)


@router.get("/tenant", response_model=TenantDashboard)
def tenant_dashboard(
    storage: MemoryStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user)
):
    return DashboardService(storage).tenant_summary(current_user)
