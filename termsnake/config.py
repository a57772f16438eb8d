"""
Runtime settings for termsnake.

Values come from TERMSNAKE_* environment variables; a .env file in the
working directory is loaded first. Every setting has a default, so an
empty environment gives the standard game.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from termsnake.domain.constants import MAX_DELAY_MS, MIN_DELAY_MS, POLL_TIMEOUT_MS, SPAWN_ATTEMPTS


class ConfigError(ValueError):
    """Raised when an environment setting cannot be used."""


@dataclass(frozen=True)
class Settings:
    max_delay_ms: int = MAX_DELAY_MS
    min_delay_ms: int = MIN_DELAY_MS
    poll_timeout_ms: int = POLL_TIMEOUT_MS
    spawn_attempts: int = SPAWN_ATTEMPTS
    log_file: Optional[str] = None
    log_level: str = "INFO"


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = _sanitize_env_value(env.get(name))
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env: mapping to read instead of os.environ (the .env file is only
             loaded when reading the real environment)

    Raises:
        ConfigError: If a value is malformed or the delays are inconsistent
    """
    if env is None:
        load_dotenv()
        env = os.environ

    settings = Settings(
        max_delay_ms=_int_setting(env, "TERMSNAKE_MAX_DELAY_MS", MAX_DELAY_MS),
        min_delay_ms=_int_setting(env, "TERMSNAKE_MIN_DELAY_MS", MIN_DELAY_MS),
        poll_timeout_ms=_int_setting(env, "TERMSNAKE_POLL_TIMEOUT_MS", POLL_TIMEOUT_MS),
        spawn_attempts=_int_setting(env, "TERMSNAKE_SPAWN_ATTEMPTS", SPAWN_ATTEMPTS, minimum=1),
        log_file=_sanitize_env_value(env.get("TERMSNAKE_LOG_FILE")) or None,
        log_level=(_sanitize_env_value(env.get("TERMSNAKE_LOG_LEVEL")) or "INFO").upper(),
    )

    if settings.min_delay_ms > settings.max_delay_ms:
        raise ConfigError(
            f"TERMSNAKE_MIN_DELAY_MS ({settings.min_delay_ms}) is larger than "
            f"TERMSNAKE_MAX_DELAY_MS ({settings.max_delay_ms})"
        )
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ConfigError(f"TERMSNAKE_LOG_LEVEL is not a log level: {settings.log_level}")

    return settings


def configure_logging(settings: Settings) -> None:
    """
    Send log records to the configured file. Without one they are dropped,
    since the terminal belongs to the game while it runs.
    """
    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.NullHandler()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
