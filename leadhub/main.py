from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leadhub.api_routers.api import api_router
from leadhub.features.health.routes.health import router as health_router
from leadhub.platform.config import settings
from leadhub.platform.exceptions import add_exception_handlers
from leadhub.platform.logger import get_logger
from leadhub.platform.storage import Storage, build_storage

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    storage: Storage = app.state.storage
    await storage.init()
    logger.info("Storage ready: %s", type(storage).__name__)
    try:
        yield
    finally:
        await storage.close()


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the application around one storage instance for the process lifetime.
    Tests pass their own ``storage``; otherwise ``STORAGE_BACKEND`` decides.
    """
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Leads and lead magnets dashboard API",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.storage = storage if storage is not None else build_storage(settings)
    # token -> exp (unix seconds)
    app.state.revoked_tokens = {}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
