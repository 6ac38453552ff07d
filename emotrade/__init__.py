from __future__ import annotations

from fastapi import FastAPI

from .config import get_settings
from .logging_config import configure_logging
from .routes.analysis import router as analysis_router
from .routes.health import router as health_router


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_url="/openapi.json",
    )
    application.include_router(health_router, tags=["health"])
    application.include_router(analysis_router, prefix="/api", tags=["analysis"])
    return application


app = create_app()
