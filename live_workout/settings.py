"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() to share one cached instance.

Usage:
    from live_workout.settings import get_settings, Settings

    settings = get_settings()
    print(settings.default_rest_seconds)

    # Tests: explicit values, no .env lookup
    settings = Settings(environment="test", _env_file=None)
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_EXERCISE_LIBRARY = (
    Path(__file__).resolve().parents[1] / "shared" / "dictionaries" / "exercise_library.yaml"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI",
    )

    # -------------------------------------------------------------------------
    # Session Engine
    # -------------------------------------------------------------------------
    default_rest_seconds: int = Field(
        default=90,
        ge=1,
        description="Rest time used when an exercise suggests none",
    )
    suggestion_limit: int = Field(
        default=5,
        ge=1,
        description="Number of substitution suggestions offered",
    )
    vibration_enabled: bool = Field(
        default=True,
        description="Run the haptic alert when a rest period ends",
    )
    tick_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Seconds between rest timer ticks",
    )

    # -------------------------------------------------------------------------
    # Supabase Storage
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )
    workout_records_table: str = Field(
        default="workouts",
        description="Table holding aggregated workout records",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Exercise Library
    # -------------------------------------------------------------------------
    exercise_library_path: Path = Field(
        default=DEFAULT_EXERCISE_LIBRARY,
        description="YAML file with the bundled exercise library",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid_levels}")
        return v.upper()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def has_supabase(self) -> bool:
        """Check if Supabase storage is configured."""
        return bool(self.supabase_url and self.supabase_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
