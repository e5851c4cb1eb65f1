"""Shared runtime settings.

This module owns environment-backed settings (debug switch, log verbosity,
fallback locale). Catalog configuration such as filter rules and image
attributes is data and lives in ``pimshift.core.configuration``.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    debug: bool
    log_verbosity: str
    default_locale: str


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Values already present in the environment win over the .env file.
    load_dotenv(Path.cwd() / ".env", override=False)
    return Settings(
        debug=_env_bool("PIMSHIFT_DEBUG", default=False),
        log_verbosity=_env_choice(
            "PIMSHIFT_LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        default_locale=os.getenv("PIMSHIFT_DEFAULT_LOCALE", "en_US").strip() or "en_US",
    )


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    settings = settings or get_settings()
    logger = logging.getLogger("pimshift")
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    return logger


__all__ = ["Settings", "configure_logging", "get_settings"]
