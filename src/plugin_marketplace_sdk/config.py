"""Runtime settings read from PLUGIN_MARKETPLACE_* environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_PREFIX = "PLUGIN_MARKETPLACE_"


@dataclass(frozen=True)
class Settings:
    """Timeouts for remote fetches and the CLI log level.

    Attributes:
        git_timeout: Seconds allowed for a single ``git clone``.
        http_timeout: Seconds allowed for an HTTP request.
        log_level: Level name for the CLI log handler.
    """

    git_timeout: float = 120
    http_timeout: float = 30
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            git_timeout=_float_env(env, "GIT_TIMEOUT", defaults.git_timeout),
            http_timeout=_float_env(env, "HTTP_TIMEOUT", defaults.http_timeout),
            log_level=_level_env(env, "LOG_LEVEL", defaults.log_level),
        )


def _float_env(env, key: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not a number", ENV_PREFIX, key, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s%s=%r: must be positive", ENV_PREFIX, key, raw)
        return default
    return value


def _level_env(env, key: str, default: str) -> str:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    # getLevelName maps known names to their int value
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s%s=%r: unknown log level", ENV_PREFIX, key, raw)
        return default
    return level
