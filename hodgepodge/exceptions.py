"""Exception hierarchy for hodgepodge conversions.

Every error raised by the package derives from HodgePodgeError so callers can
handle conversion failures in one place. Lookup tables never raise; they
return None for unknown keys.
"""


class HodgePodgeError(Exception):
    """Base exception for all hodgepodge errors."""


class UnsupportedCalendarSystemError(HodgePodgeError, ValueError):
    """A calendar value is not backed by the Gregorian calendar.

    Raised when:
    - A CalendarValue tagged with any CalendarSystem other than GREGORIAN is
      passed to a conversion

    The value is never coerced or truncated into Gregorian fields.
    """


class IncompleteCalendarError(HodgePodgeError, ValueError):
    """A partial calendar value lacks the component a conversion needs.

    Raised when:
    - A date-only calendar is converted to an instant or zoned date-time
    - A time-only calendar is asked for its date
    """


class MalformedLocaleConfigurationError(HodgePodgeError):
    """Locale settings do not select exactly one date field order.

    Raised when:
    - None of the YMD, DMY and MDY flags is set
    - More than one of them is set
    """


class UnresolvableZoneLabelError(HodgePodgeError):
    """A Notes time zone field could not be mapped to an IANA zone.

    The lookup functions in hodgepodge.notes.zones return None instead of
    raising; this error is only raised by conversions that cannot continue
    without a zone.
    """

    def __init__(self, notes_time_zone: str) -> None:
        super().__init__(f"No IANA time zone known for Notes time zone {notes_time_zone!r}")
        self.notes_time_zone = notes_time_zone


class DateTimeTextParseError(HodgePodgeError):
    """A Notes date/time rendering does not match the locale pattern.

    Usually means the locale settings drifted from the format the value was
    rendered with.
    """

    def __init__(self, text: str, pattern: str) -> None:
        super().__init__(f"Cannot parse {text!r} with pattern {pattern!r}")
        self.text = text
        self.pattern = pattern
