"""Configuration management for consensus-panel."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Panel defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONSENSUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Panel sizing
    panelist_count: int = Field(default=13, ge=1)
    traits_per_panelist: int = Field(default=5, ge=0)

    # Random source; None seeds from system entropy
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
