from fastapi import APIRouter, status

from leadhub.platform.config import settings

router = APIRouter()


@router.get("/health", tags=["health"], status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "ok", "service": settings.APP_NAME}
