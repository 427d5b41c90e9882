"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Database
    database_url: str = Field(
        default="sqlite:///./workout_builder.db",
        description="Database connection URL",
    )

    # Selection tuning
    minimum_threshold: int = Field(
        default=20,
        ge=0,
        description="Primary pool size below which secondary-muscle exercises are added",
    )
    pool_multiplier: int = Field(
        default=4, ge=1, description="Candidate pool size as a multiple of the limit"
    )
    minimum_pool_size: int = Field(
        default=30, ge=1, description="Lower bound of the candidate pool size"
    )
    primary_ratio: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Share of slots reserved for primary-muscle exercises",
    )
    excluded_value: str = Field(
        default="STRETCHING",
        description="Attribute value that disqualifies an exercise from selection",
    )

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
