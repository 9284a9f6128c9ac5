"""Конфигурация приложения."""
import logging
import math
import os
import threading
from functools import lru_cache

from .constants import DEFAULT_TURN_SECONDS, LOG_LEVELS, TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("config: %s=%r is not a number, using %s", name, raw, default)
        return default
    # Event.wait в таймере не принимает inf/nan и слишком большие интервалы
    if value <= 0 or not math.isfinite(value) or value > threading.TIMEOUT_MAX:
        logger.warning("config: %s=%r must be a positive finite number, using %s", name, raw, default)
        return default
    return value


def _env_log_level() -> str:
    raw = os.environ.get("LOG_LEVEL", "WARNING").strip().upper()
    if raw not in LOG_LEVELS:
        logger.warning("config: LOG_LEVEL=%r is not a logging level, using WARNING", raw)
        return "WARNING"
    return raw


@lru_cache
def get_config():
    debug = os.environ.get("DEBUG", "0").lower() in ("1", "true", "yes")
    return type("Config", (), {
        "stats_file": os.environ.get("STATS_FILE", "gamedata.json"),
        "turn_seconds": _env_number("TURN_SECONDS", DEFAULT_TURN_SECONDS, int),
        "tick_interval": _env_number("TICK_INTERVAL", TICK_INTERVAL_SECONDS, float),
        "debug": debug,
        "log_level": "DEBUG" if debug else _env_log_level(),
        "log_file": os.environ.get("LOG_FILE") or None,
    })()
