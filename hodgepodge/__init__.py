"""hodgepodge - date/time conversions for Python and Notes/Domino values.

Converts between instants, calendar values, zoned and local date-times
(``hodgepodge.convert``) and to and from Notes date-time objects
(``hodgepodge.notes``).
"""

__version__ = "1.0.0"

from .exceptions import (
    DateTimeTextParseError,
    HodgePodgeError,
    IncompleteCalendarError,
    MalformedLocaleConfigurationError,
    UnresolvableZoneLabelError,
    UnsupportedCalendarSystemError,
)
from .models import CalendarKind, CalendarSystem, CalendarValue, Instant, LocaleSettings

__all__ = [
    "CalendarKind",
    "CalendarSystem",
    "CalendarValue",
    "DateTimeTextParseError",
    "HodgePodgeError",
    "IncompleteCalendarError",
    "Instant",
    "LocaleSettings",
    "MalformedLocaleConfigurationError",
    "UnresolvableZoneLabelError",
    "UnsupportedCalendarSystemError",
    "__version__",
]
