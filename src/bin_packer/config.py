"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_BIN_SIZE = 400
DEFAULT_PACKAGE_COUNT = 100
DEFAULT_MAX_PACKAGE_SIZE = 100
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    bin_size: int = DEFAULT_BIN_SIZE
    package_count: int = DEFAULT_PACKAGE_COUNT
    max_package_size: int = DEFAULT_MAX_PACKAGE_SIZE
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings(dotenv: bool = True) -> Settings:
    """
    Read settings from BIN_PACKER_* environment variables.

    A .env file in the working directory is loaded first when present;
    it never overrides variables already set in the environment.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        bin_size=_get_int("BIN_PACKER_BIN_SIZE", DEFAULT_BIN_SIZE),
        package_count=_get_int("BIN_PACKER_PACKAGE_COUNT", DEFAULT_PACKAGE_COUNT),
        max_package_size=_get_int("BIN_PACKER_MAX_PACKAGE_SIZE", DEFAULT_MAX_PACKAGE_SIZE),
        seed=_get_int("BIN_PACKER_SEED", None),
        log_level=_get_log_level("BIN_PACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
