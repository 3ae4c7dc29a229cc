"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="America/Bogota",
        description="IANA time zone (or UTC offset) used to decide what 'today' is",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    enable_scheduler: bool = Field(
        default=True,
        description="Run the recurring entitlement check in the background",
    )
    scheduler_initial_delay_seconds: int = Field(
        default=10,
        description="Seconds to wait after start-up before the first check",
        ge=0,
    )
    scheduler_interval_hours: int = Field(
        default=24,
        description="Hours between two recurring entitlement checks",
        gt=0,
    )

    allowance_window_months: int = Field(
        default=1,
        description="Look-ahead window in months for upcoming allowances",
        ge=0,
    )
    promotion_window_months: int = Field(
        default=2,
        description="Look-ahead window in months for upcoming promotions",
        ge=0,
    )
    retirement_window_months: int = Field(
        default=3,
        description="Look-ahead window in months for upcoming retirements",
        ge=0,
    )
    promotion_cycle_years: int = Field(
        default=4,
        description="Number of years between two promotion entitlements",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
