# src/netrate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file with validation.

Files that USE this module:
- netrate.app (wires the engine and logging from settings)

Files that this module USES:
- netrate.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from netrate.shared.validators import validate_log_level


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Logical time ---
    # Height the ledger clock starts at when the engine is built
    genesis_height: int = Field(default=0, alias="NETRATE_GENESIS_HEIGHT", ge=0)

    # --- Rate validation ---
    # Off by default: windows are stored as given, even when empty or inverted
    enforce_rate_windows: bool = Field(default=False, alias="NETRATE_ENFORCE_RATE_WINDOWS")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="NETRATE_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="NETRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        if not validate_log_level(v):
            raise ValueError("NETRATE_LOG_LEVEL must be a standard logging level name")
        return v.upper()


# Global settings instance
settings = Settings()
