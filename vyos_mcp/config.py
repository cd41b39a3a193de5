"""Process configuration loaded from the environment.

All settings use the ``VYOS_`` prefix, e.g. ``VYOS_HOST`` and ``VYOS_API_KEY``.
Values may also come from a ``.env`` file in the working directory.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.enums import ProtocolVersion


class Settings(BaseSettings):
    """VyOS MCP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="VYOS_",
        env_file=".env",
        extra="ignore",
    )

    # Router REST API
    host: str = Field(..., min_length=1, description="Router base URL, e.g. https://192.0.2.1")
    api_key: str = Field(..., min_length=1, description="REST API key")
    verify_ssl: bool = False  # Routers ship a self-signed certificate
    timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)

    # Server
    log_level: str = "INFO"
    default_protocol_version: ProtocolVersion = ProtocolVersion.V2025_06_18

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use.

    Raises:
        pydantic.ValidationError: If VYOS_HOST or VYOS_API_KEY is missing or empty.
    """
    return Settings()
