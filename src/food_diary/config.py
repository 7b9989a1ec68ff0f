"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    default_timezone: str = "UTC"
    fallback_utc_offset_minutes: int = 0
    max_upload_bytes: int = 5 * 1024 * 1024
    allowed_image_types: str = "image/jpeg,image/png,image/gif"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_image_types(raw: str | None) -> frozenset[str]:
    """Parse the comma separated list of accepted upload MIME types."""
    if raw is None:
        return frozenset()
    types: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value:
            types.add(value)
    return frozenset(types)
