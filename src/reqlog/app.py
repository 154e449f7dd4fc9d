"""FastAPI application factory."""

import structlog
from fastapi import FastAPI

from reqlog.config import Settings
from reqlog.middleware import RequestLoggingMiddleware
from reqlog.routes import health

logger = structlog.get_logger()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function to create a FastAPI application with request logging.

    Args:
        settings: Configuration instance. Creates default if None.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="reqlog",
        version="0.1.0",
        docs_url="/api/v1/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/api/v1/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings

    app.add_middleware(
        RequestLoggingMiddleware,
        name=settings.component,
        sink=structlog.get_logger(),
        config=settings.logger_config(),
    )

    app.include_router(health.router, prefix="/api/v1")

    logger.debug(
        "request_logging_enabled",
        component=settings.component,
        level=settings.log_level,
        level_from_status=settings.level_from_status,
    )
    return app
