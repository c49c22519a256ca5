"""Runtime settings, read from ``LABMATH_*`` environment variables.

Tests (and embedding applications) pass an explicit :class:`Settings` to
``create_app``; otherwise the environment is read once at startup.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from labmath.services.moments import DEFAULT_SEED


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LABMATH_", extra="ignore")

    app_title: str = "Labmath API"
    log_level: str = Field(default="INFO", description="Level for the labmath loggers")
    log_json: bool = Field(default=False, description="Emit JSON lines instead of console output")

    moments_seed: int = Field(default=DEFAULT_SEED, description="Seed used when a moments request has none")
    batch_max_rows: int = Field(default=5000, gt=0, description="Reject CSV uploads with more data rows")
    batch_preview_rows: int = Field(default=50, ge=0, description="Rows echoed back in a batch response")


def get_settings() -> Settings:
    return Settings()
