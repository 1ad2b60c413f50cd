from fastapi import APIRouter

from leadhub.features.auth.routes.auth import router as auth_router
from leadhub.features.dashboard.routes.dashboard import router as dashboard_router
from leadhub.features.lead_magnets.routes.lead_magnet_route import router as lead_magnets_router
from leadhub.features.leads.routes.lead_route import router as leads_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(auth_router)
api_router.include_router(leads_router)
api_router.include_router(lead_magnets_router)
api_router.include_router(dashboard_router)
