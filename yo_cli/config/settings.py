"""
Configuration management for the yo CLI core.
Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def _default_config_dir() -> str:
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return str(base / "configstore")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = Field(default="INFO")
    format: str = Field(default="json")
    file_path: Optional[str] = Field(default=None)

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    class Config:
        env_prefix = "LOG_"


class ConfigStoreSettings(BaseSettings):
    """Location of persisted key-value stores."""

    directory: str = Field(default_factory=_default_config_dir)

    class Config:
        env_prefix = "CONFIGSTORE_"


class UpdateCheckSettings(BaseSettings):
    """Published-version lookup for installed generators."""

    enabled: bool = Field(default=True)
    registry_url: str = Field(default="https://registry.npmjs.org")
    interval_seconds: int = Field(default=60 * 60 * 24)
    # Per registry request. Paid by the caller of check() only when
    # background is off: then a rebuild can wait up to timeout x uncached
    # generators. Background refreshes run on daemon threads.
    timeout: float = Field(default=5.0)
    background: bool = Field(default=True)

    @field_validator("registry_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("interval_seconds")
    @classmethod
    def validate_interval(cls, v):
        if v < 0:
            raise ValueError("Update check interval must not be negative")
        return v

    class Config:
        env_prefix = "UPDATE_CHECK_"


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    app_name: str = Field(default="yo-cli")
    app_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Sub-configurations
    logging: LoggingSettings = LoggingSettings()
    config_store: ConfigStoreSettings = ConfigStoreSettings()
    update_check: UpdateCheckSettings = UpdateCheckSettings()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ["development", "staging", "production", "test"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}")
        return v.lower()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
