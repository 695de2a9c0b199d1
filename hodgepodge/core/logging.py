"""Console logging setup for hodgepodge.

The library itself only creates module loggers; applications (and the test
suite) call ``configure_logging`` to get readable console output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

from .config import is_truthy

ENV_DEBUG = "HODGEPODGE_DEBUG"
ENV_LOG_LEVEL = "HODGEPODGE_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# Marks the handler we installed so repeated calls don't stack handlers
_HANDLER_NAME = "hodgepodge-console"


def configure_logging(debug_mode: bool = False, force_debug: Optional[bool] = None) -> None:
    """Configure the ``hodgepodge`` logger hierarchy.

    Args:
        debug_mode: Whether to log hodgepodge modules at DEBUG
        force_debug: Override debug mode setting (None to use env var detection)

    Environment Variables:
        HODGEPODGE_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        HODGEPODGE_LOG_LEVEL: Explicit level (DEBUG, INFO, WARNING, ERROR)
    """
    if force_debug is not None:
        final_debug = force_debug
    elif is_truthy(os.environ.get(ENV_DEBUG)):
        final_debug = True
    else:
        final_debug = debug_mode

    level = logging.DEBUG if final_debug else logging.INFO
    env_level = os.environ.get(ENV_LOG_LEVEL, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        level = getattr(logging, env_level)

    package_logger = logging.getLogger("hodgepodge")
    package_logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.set_name(_HANDLER_NAME)
        formatter = ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging configured at level %s", logging.getLevelName(level))


def get_logging_status() -> dict[str, str]:
    """Get the current hodgepodge logger levels, keyed by logger name."""
    names = ["hodgepodge", "hodgepodge.convert", "hodgepodge.notes"]
    return {name: logging.getLevelName(logging.getLogger(name).level) for name in names}
