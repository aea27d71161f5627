from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.dashboard_service import DashboardService
from ..schemas.dashboard import DashboardStats
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["dashboard"])


@router.get("", response_model=DashboardStats)
@handle_service_errors
async def get_dashboard_stats(db: Session = Depends(get_db)):
    dashboard_service = DashboardService(db)

    return DashboardStats.model_validate(dashboard_service.get_stats())
