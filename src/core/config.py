"""
Environment-based configuration.
Read once at startup; nothing else in the app touches os.environ.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_VOLUME = 0.8


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _env_volume(value: Optional[str]) -> float:
    if value is None or not value.strip():
        return DEFAULT_VOLUME
    try:
        volume = float(value)
    except ValueError:
        logger.warning("Invalid PLAYSTATE_VOLUME=%r, using %s", value, DEFAULT_VOLUME)
        return DEFAULT_VOLUME
    if volume != volume:  # NaN
        return DEFAULT_VOLUME
    return min(1.0, max(0.0, volume))


@dataclass(frozen=True)
class AppConfig:
    catalog_path: Optional[str] = None
    music_dir: Optional[str] = None
    volume: float = DEFAULT_VOLUME
    autoplay: bool = False
    log_level: str = "INFO"
    env: str = "production"

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> AppConfig:
        env = os.environ if environ is None else environ
        return AppConfig(
            catalog_path=env.get("PLAYSTATE_CATALOG") or None,
            music_dir=env.get("PLAYSTATE_MUSIC_DIR") or None,
            volume=_env_volume(env.get("PLAYSTATE_VOLUME")),
            autoplay=_env_flag(env.get("PLAYSTATE_AUTOPLAY")),
            log_level=(env.get("PLAYSTATE_LOG_LEVEL") or "INFO").upper(),
            env=(env.get("PLAYSTATE_ENV") or "production").lower(),
        )
