"""
Settings

Read from environment variables on each call so tests and short-lived
scripts can change them at runtime.
"""
import logging
import os
from typing import Optional

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


def get_settings() -> Settings:
    return Settings(
        log_level=os.environ.get("IMAGES_LOG_LEVEL", "INFO"),
        log_file=os.environ.get("IMAGES_LOG_FILE") or None,
    )
