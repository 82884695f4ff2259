"""Configuration helpers for the crosspath command line."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "CROSSPATH_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ViewChoice = Literal["posix", "win32", "native"]


class AppConfig(BaseModel):
    """Application level configuration."""

    log_level: str = Field(default="INFO")
    default_view: ViewChoice = Field(default="posix")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}; got {value!r}")
        return level


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from a YAML file.

    When ``path`` is omitted the file named by ``CROSSPATH_CONFIG`` is used.
    A missing file yields the defaults.
    """

    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return AppConfig()
        path = Path(env_path)
    data: Any = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a mapping of settings; got {type(data).__name__}")
    return AppConfig(**data)
