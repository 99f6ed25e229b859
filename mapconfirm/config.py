#!/usr/bin/env python3
"""
Centralized configuration management for mapconfirm.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .keys import FIXED_KEYS


class MapConfirmConfig(BaseSettings):
    """Main configuration for interactive confirmation sessions."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Key bindings
    help_key: str = Field(default="?", validation_alias="MAPCONFIRM_HELP_KEY")

    # Invalid input handling
    invalid_key_pause: float = Field(
        default=1.0, validation_alias="MAPCONFIRM_INVALID_KEY_PAUSE"
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", validation_alias="MAPCONFIRM_LOG_LEVEL")
    log_format: str = Field(default="console", validation_alias="MAPCONFIRM_LOG_FORMAT")

    @field_validator("help_key")
    @classmethod
    def validate_help_key(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("Help key must be a single character")
        if v in FIXED_KEYS:
            raise ValueError(f"Help key {v!r} is already bound to a built-in answer")
        return v

    @field_validator("invalid_key_pause")
    @classmethod
    def validate_pause(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Invalid key pause must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = {"console", "json"}
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()


# Global config instance
_config: Optional[MapConfirmConfig] = None


def get_config() -> MapConfirmConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = MapConfirmConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
