"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # Preset used when a caller does not name one
    default_preset: str = "standard"

    # Hard ceiling for tree traversal; maxNestingDepth is only advisory.
    # Kept below the JSON serializer's own nesting limit (~127).
    max_traversal_depth: int = 100

    model_config = SettingsConfigDict(
        env_prefix="VECTORLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
