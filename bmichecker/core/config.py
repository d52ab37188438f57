"""
Configuration management for BMI Checker.

Loads settings from the packaged YAML file.
Uses Pydantic for validation. Environment variables are not consulted.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from bmichecker.core.exceptions import ConfigurationError

DEFAULT_SETTINGS_FILE = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Application settings loaded from settings.yaml.

    Only logging is configurable; prompts, limits and labels are constants.
    """

    model_config = SettingsConfigDict(
        yaml_file=DEFAULT_SETTINGS_FILE,
        yaml_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level for stderr diagnostics",
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="logging.Formatter format string",
    )
    log_datefmt: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="logging.Formatter date format",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use explicit arguments, then the YAML file. No environment."""
        return (init_settings, YamlConfigSettingsSource(settings_cls))

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase and known to logging."""
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Valid levels: {list(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    try:
        return Settings()
    except ValidationError as e:
        errors = e.errors()
        loc = errors[0]["loc"] if errors else ()
        raise ConfigurationError(
            f"Invalid settings in {DEFAULT_SETTINGS_FILE}: {e}",
            config_key=str(loc[0]) if loc else None,
        ) from e
