"""
Application settings.

Responsibilities:
- Load configuration from environment variables and .env files.
- Validate values and provide defaults matching the stock Chirpy server
  (all interfaces, port 8080, static files from the working directory).
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path

from chirpy.config.env import env_int, env_list, env_str, load_chirpy_env
from chirpy.core.exceptions import ConfigError

DEFAULT_PROFANE_WORDS: tuple[str, ...] = ("kerfuffle", "sharbert", "fornax")
MAX_CHIRP_LENGTH = 140
LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Settings:
    """Typed service configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    filepath_root: Path = Path(".")
    max_chirp_length: int = MAX_CHIRP_LENGTH
    profane_words: tuple[str, ...] = DEFAULT_PROFANE_WORDS
    log_level: str = "INFO"
    log_format: str = "json"


def load_settings() -> Settings:
    """
    Build Settings from the environment (after loading .env).

    Raises:
        ConfigError: On a non-integer or out-of-range port / length, or an unknown log format.
    """
    load_chirpy_env()
    port = env_int("CHIRPY_PORT", 8080)
    if not 0 < port < 65536:
        raise ConfigError(f"CHIRPY_PORT out of range: {port}")
    max_len = env_int("CHIRPY_MAX_CHIRP_LENGTH", MAX_CHIRP_LENGTH)
    if max_len < 0:
        raise ConfigError(f"CHIRPY_MAX_CHIRP_LENGTH must be non-negative: {max_len}")
    log_format = env_str("LOG_FORMAT", "json").lower()
    if log_format not in LOG_FORMATS:
        raise ConfigError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")
    return Settings(
        host=env_str("CHIRPY_HOST", "0.0.0.0"),
        port=port,
        filepath_root=Path(env_str("CHIRPY_FILEPATH_ROOT", ".")),
        max_chirp_length=max_len,
        profane_words=env_list("CHIRPY_PROFANE_WORDS", DEFAULT_PROFANE_WORDS),
        log_level=env_str("LOG_LEVEL", "INFO").upper(),
        log_format=log_format,
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process settings, loaded once. Tests call get_settings.cache_clear()."""
    return load_settings()
