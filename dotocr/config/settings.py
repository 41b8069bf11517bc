"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    # Gemini (static API key, sent as the x-goog-api-key header)
    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def require_api_key(self) -> str:
        """
        Return the Gemini API key, failing if it is not configured.

        Raises:
            ConfigurationError: GEMINI_API_KEY is unset or blank
        """
        key = self.gemini_api_key.get_secret_value() if self.gemini_api_key else ""
        if not key.strip():
            raise ConfigurationError(
                "GEMINI_API_KEY is not configured. Set it in the environment "
                "or a .env file using a key from Google AI Studio."
            )
        return key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
