# influx/client/core/config.py
"""
Central configuration for the platform client.

Environment variables (``INFLUX_`` prefix) override defaults.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="INFLUX_", env_file=".env", extra="ignore"
    )

    url: str = Field(
        default="http://localhost:8086",
        description="Base URL of the platform API",
    )
    token: str | None = Field(default=None, description="API token")
    org: str | None = Field(
        default=None,
        description="Default organization name for queries",
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout (s)")

    log_level: str = "INFO"


settings = Settings()
