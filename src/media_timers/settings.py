"""Application settings loaded from .env via Pydantic."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class TimerSettings(BaseSettings):
    base_dir: Path = Field(default_factory=Path.home)
    default_timer_name: str = "Unnamed"

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_TIMERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_dir", mode="before")
    @classmethod
    def _expand_base_dir(cls, value: Path) -> Path:
        return Path(value).expanduser().resolve()

    @field_validator("base_dir")
    @classmethod
    def _validate_base_dir(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"Base directory does not exist: {value}")
        return value

    @field_validator("default_timer_name")
    @classmethod
    def _validate_default_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Default timer name must not be blank")
        return value


_settings: Optional[TimerSettings] = None


def get_settings() -> TimerSettings:
    global _settings
    if _settings is None:
        _settings = TimerSettings()
        logger.debug("Loaded settings: base_dir=%s", _settings.base_dir)
    return _settings


def base_dir() -> Path:
    return get_settings().base_dir


def default_timer_name() -> str:
    return get_settings().default_timer_name


def reset_settings_cache() -> None:
    global _settings
    _settings = None
