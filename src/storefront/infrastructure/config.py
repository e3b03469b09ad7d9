"""Runtime settings read from the environment.

A ``.env`` file in the working directory is honoured (python-dotenv)
but never overrides variables already set in the process environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from storefront.domain.model.user import DEFAULT_BLOCK_THRESHOLD

# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'storefront.db'}"
LOG_FORMATS = ("console", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """An environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    cancel_block_threshold: int = DEFAULT_BLOCK_THRESHOLD
    lock_timeout: float = 30.0
    log_level: str = "WARNING"
    log_format: str = "console"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        threshold = _parse(env, "STOREFRONT_CANCEL_BLOCK_THRESHOLD", int, DEFAULT_BLOCK_THRESHOLD)
        if threshold < 1:
            raise ConfigurationError("STOREFRONT_CANCEL_BLOCK_THRESHOLD must be at least 1")

        lock_timeout = _parse(env, "STOREFRONT_LOCK_TIMEOUT", float, 30.0)
        if lock_timeout <= 0:
            raise ConfigurationError("STOREFRONT_LOCK_TIMEOUT must be positive")

        log_level = env.get("STOREFRONT_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"STOREFRONT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}"
            )

        log_format = env.get("STOREFRONT_LOG_FORMAT", "console").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"STOREFRONT_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}"
            )

        return cls(
            database_url=env.get("STOREFRONT_DATABASE_URL", DEFAULT_DATABASE_URL),
            cancel_block_threshold=threshold,
            lock_timeout=lock_timeout,
            log_level=log_level,
            log_format=log_format,
        )


def load_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()


def _parse(env: Mapping[str, str], key: str, kind, default):
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} has an invalid value: {raw!r}") from exc
