from fastapi import APIRouter, Depends, HTTPException, status

from leadhub.features.auth.dependencies import get_current_user_id
from leadhub.features.dashboard.schemas.dashboard import DashboardStats
from leadhub.features.dashboard.services.dashboard import DashboardService
from leadhub.platform.logger import get_logger
from leadhub.platform.storage.base import Storage
from leadhub.platform.storage.dependencies import get_storage

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_current_user_id)],
)
logger = get_logger(__name__)


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Get dashboard statistics",
)
async def get_dashboard_stats(storage: Storage = Depends(get_storage)):
    """
    Get overall dashboard statistics including:
    - Total leads
    - Hot leads
    - Conversion rate (share of qualified leads)
    - Active funnels
    - Average lead score
    """
    try:
        return await DashboardService(storage).get_dashboard_stats()
    except Exception:
        logger.exception("Failed to fetch dashboard stats")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch dashboard stats",
        )
