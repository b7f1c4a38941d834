"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fitai.services.targets import DEFAULT_FALLBACK_KCAL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    target_fallback_kcal: int | None = DEFAULT_FALLBACK_KCAL
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("target_fallback_kcal", mode="before")
    @classmethod
    def _blank_disables_fallback(cls, value: object) -> object:
        """Treat an empty value as "no fallback"."""
        if isinstance(value, str) and value.strip() in {"", "none", "off"}:
            return None
        return value
