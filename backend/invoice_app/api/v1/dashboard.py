"""
Router FastAPI per la dashboard
Progetto: Invoice Manager
"""

from fastapi import APIRouter, Depends

from invoice_app.core.deps import Store, get_dashboard_service
from invoice_app.schemas.dashboard import DashboardStats
from invoice_app.services.dashboard_service import DashboardService

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)


@router.get(
    "/",
    name="dashboard_stats",
    summary="Statistiche dashboard",
    response_model=DashboardStats,
)
async def get_dashboard(
    store: Store,
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStats:
    return await service.get_stats(store)
