"""Configuration and logging support for hodgepodge."""

from .config import get_default_timezone, load_locale_settings
from .logging import configure_logging, get_logging_status

__all__ = [
    "configure_logging",
    "get_default_timezone",
    "get_logging_status",
    "load_locale_settings",
]
