"""Settings loaded from environment variables and an optional .env file."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = _get_env(name)
    if raw is None:
        return default
    values = tuple(item.strip() for item in raw.split(",") if item.strip())
    return values or default


@dataclass(frozen=True)
class Settings:
    app_title: str
    log_level: str
    max_upload_mb: int
    upload_dir: str
    cors_allow_origins: Tuple[str, ...]

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        app_title=_get_env("APP_TITLE", "Resume Career Assessment API"),
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
        max_upload_mb=_get_env_int("MAX_UPLOAD_MB", 5),
        upload_dir=_get_env("UPLOAD_DIR", "uploads"),
        cors_allow_origins=_get_env_list("CORS_ALLOW_ORIGINS", ("*",)),
    )
