"""
Runtime configuration read from the environment.

CALC_DISPLAY_HOST, CALC_DISPLAY_PORT and CALC_DISPLAY_LOG_LEVEL supply the
defaults; command-line flags override them.
"""

import logging
import os
import sys
from typing import Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "INFO"

HOST = os.environ.get("CALC_DISPLAY_HOST", DEFAULT_HOST)
LOG_LEVEL = os.environ.get("CALC_DISPLAY_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def _env_port() -> int:
    raw = os.environ.get("CALC_DISPLAY_PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CALC_DISPLAY_PORT must be an integer, got {raw!r}") from None


PORT = _env_port()


def parse_log_level(name: str) -> int:
    """Map a level name such as "debug" to its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the 'calc_display' namespace logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to.
    """
    logger = logging.getLogger("calc_display")
    logger.setLevel(level)

    # Avoid duplicate handlers when called again (tests, reloader).
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
