from __future__ import annotations

from fastapi import Request

from labmath.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings
