"""
Application configuration loaded from environment variables.

Uses Pydantic Settings to:
1. Read from .env file automatically
2. Validate values at startup (page size, footer timing, margins)
3. Provide type-safe access throughout the app

Usage:
    from goal_report.config import settings
    print(settings.REPORT_BRAND)

Note: We use a validator that prefers .env values over empty shell
environment variables, so a blank REPORT_BRAND="" exported by some
tool doesn't shadow the real value in .env.
"""

from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All application configuration in one place."""

    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file
        env_file_encoding="utf-8",
        case_sensitive=True,     # ENV_VAR must match exactly
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def prefer_dotenv_over_empty_env(cls, data):
        """If an env var is empty but .env has a value, use the .env value.

        Pydantic Settings prioritizes real env vars over .env file values,
        even when the real env var is an empty string. This fills those
        blanks from .env.
        """
        from dotenv import dotenv_values

        dotenv_vals = dotenv_values(".env")
        for key, dotenv_value in dotenv_vals.items():
            if dotenv_value and (key not in data or not data.get(key)):
                data[key] = dotenv_value
        return data

    # --- Report branding (page chrome) ---
    REPORT_BRAND: str = "Aivora"
    REPORT_SUBTITLE: str = "Goal Achievement Report"
    REPORT_ATTRIBUTION: str = "Generated by Aivora - AI-Powered Goal Achievement Platform"

    # --- Report layout ---
    REPORT_PAGE_SIZE: Literal["A4", "LETTER"] = "A4"
    REPORT_MARGIN: float = 50
    REPORT_FOOTER_TIMING: Literal["per_page", "deferred"] = "per_page"

    # --- Streaming ---
    STREAM_CHUNK_SIZE: int = 64 * 1024

    # --- Application ---
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Singleton instance - import this everywhere
settings = Settings()
