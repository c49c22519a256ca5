from __future__ import annotations

import structlog
from fastapi import FastAPI

from labmath.api.router import api_router
from labmath.config.logging import configure_logging
from labmath.config.settings import Settings, get_settings

log = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)

    app = FastAPI(title=settings.app_title, version="1.0.0")
    app.state.settings = settings

    # API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    log.info("app_created", title=settings.app_title, log_level=settings.log_level)
    return app


app = create_app()
