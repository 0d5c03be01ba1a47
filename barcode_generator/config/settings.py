"""
Library settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARCODE_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Partitioned generation
    partition_size: int = Field(1000, ge=1, description="Bases handed to each worker")
    max_workers: int | None = Field(
        None, ge=1, description="Worker pool size (None uses the executor default)"
    )
    worker_backend: Literal["thread", "process"] = "thread"

    # Numeric range
    max_barcode: int | None = Field(
        None, ge=9, description="Largest barcode value to accept or produce (None: unbounded)"
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()
