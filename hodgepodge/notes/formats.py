"""Parse patterns for Notes date/time renderings.

Notes renders date-times according to the session's International settings,
for example ``10/9/2018 11:10:09 PM MST`` in the US or
``8.9.2018 09:42:55 CET`` in Germany. The functions here turn those settings
into a ``strptime`` pattern and parse renderings with it.

Zone abbreviations can't be parsed reliably (``strptime`` only knows UTC, GMT
and the host's own names), so the bridge strips the trailing zone token and
uses the pattern without a zone slot.
"""

from __future__ import annotations

import datetime
import logging
import threading
from typing import Callable, Optional

from ..exceptions import DateTimeTextParseError, MalformedLocaleConfigurationError
from .protocols import International

logger = logging.getLogger(__name__)

YEAR = "%Y"
MONTH = "%m"
DAY = "%d"


def _escape(separator: str) -> str:
    return separator.replace("%", "%%")


def _date_fields(i18n: International) -> tuple[str, str, str]:
    flags = {
        (YEAR, MONTH, DAY): i18n.is_date_ymd,
        (DAY, MONTH, YEAR): i18n.is_date_dmy,
        (MONTH, DAY, YEAR): i18n.is_date_mdy,
    }
    selected = [fields for fields, enabled in flags.items() if enabled]
    if len(selected) != 1:
        raise MalformedLocaleConfigurationError(
            "Exactly one of is_date_ymd, is_date_dmy and is_date_mdy must be set "
            f"(got ymd={i18n.is_date_ymd}, dmy={i18n.is_date_dmy}, mdy={i18n.is_date_mdy})"
        )
    return selected[0]


def build_format_pattern(i18n: International, with_zone: bool = False) -> str:
    """Build a strptime pattern matching Notes renderings for these settings.

    The AM/PM labels are not part of the pattern; only the 24-hour flag
    decides whether an AM/PM slot is present.

    Args:
        i18n: Notes International settings
        with_zone: Append a zone name slot (``%Z``)

    Returns:
        Pattern such as ``"%m/%d/%Y %I:%M:%S %p"``

    Raises:
        MalformedLocaleConfigurationError: If not exactly one date order is set
    """
    dsep = _escape(i18n.date_sep)
    tsep = _escape(i18n.time_sep)

    pattern = dsep.join(_date_fields(i18n))
    pattern += " "
    pattern += "%H" if i18n.is_time_24_hour else "%I"
    pattern += tsep + "%M" + tsep + "%S"
    if not i18n.is_time_24_hour:
        pattern += " %p"
    if with_zone:
        pattern += " %Z"
    return pattern


def strip_zone_token(text: str) -> str:
    """Remove the trailing zone token, e.g. ``" MST"``, from a rendering."""
    head, sep, _ = text.strip().rpartition(" ")
    return head if sep else text.strip()


def parse_notes_text(text: str, pattern: str) -> datetime.datetime:
    """Parse a Notes rendering (zone token already removed) into a naive datetime.

    Raises:
        DateTimeTextParseError: If the text does not match the pattern
    """
    try:
        return datetime.datetime.strptime(text.strip(), pattern)
    except ValueError as e:
        raise DateTimeTextParseError(text, pattern) from e


class FormatCache:
    """Holds the parse pattern, built once on first use and then reused.

    Building requires the session's International settings, which are only
    fetched the first time a pattern is needed. Concurrent first calls are
    serialized so exactly one build happens and every caller sees the
    finished string.
    """

    def __init__(self, pattern: Optional[str] = None) -> None:
        self._pattern = pattern
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._pattern is not None

    def get_pattern(self, load_settings: Callable[[], International]) -> str:
        """Return the cached pattern, building it from ``load_settings()`` if needed."""
        pattern = self._pattern
        if pattern is not None:
            return pattern
        with self._lock:
            if self._pattern is None:
                self._pattern = build_format_pattern(load_settings())
                logger.debug("Built Notes date/time pattern %r", self._pattern)
            return self._pattern

    def prime(self, pattern: str) -> None:
        """Use a known pattern instead of building one from session settings."""
        with self._lock:
            self._pattern = pattern

    def reset(self) -> None:
        with self._lock:
            self._pattern = None
