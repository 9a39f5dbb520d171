"""Runtime settings read from ``CHECKLIB_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from checklib.exceptions import ConfigError

DEFAULT_TIMEOUT = 10.0  # seconds per registry request

_LOG_FORMATS = ("console", "json")


def _env_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Reads:
            CHECKLIB_TIMEOUT    — per-request timeout in seconds (default: 10)
            CHECKLIB_LOG_LEVEL  — diagnostic log level (default: WARNING)
            CHECKLIB_LOG_FORMAT — console | json (default: console)
        """
        log_format = os.environ.get("CHECKLIB_LOG_FORMAT", "console").lower()
        if log_format not in _LOG_FORMATS:
            raise ConfigError(f"CHECKLIB_LOG_FORMAT must be one of {_LOG_FORMATS}, got {log_format!r}")
        return cls(
            timeout=_env_float("CHECKLIB_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=os.environ.get("CHECKLIB_LOG_LEVEL", "WARNING").upper(),
            log_format=log_format,
        )
