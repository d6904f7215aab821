"""
Environment loading for Chirpy.

- Loads .env from project root when available.
- Small typed readers over os.getenv used by settings.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from chirpy.core.exceptions import ConfigError

# Project root: config is chirpy/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"


def load_chirpy_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set vars."""
    load_dotenv(_ENV_PATH, override=False)


def env_str(name: str, default: str) -> str:
    """Return the stripped value of env var `name`, or `default` when unset or blank."""
    return (os.getenv(name) or "").strip() or default


def env_int(name: str, default: int) -> int:
    """
    Return env var `name` as int, or `default` when unset or blank.

    Raises:
        ConfigError: If the value is set but not an integer.
    """
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Return comma-separated env var `name` as a tuple of non-empty items, or `default`."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())
