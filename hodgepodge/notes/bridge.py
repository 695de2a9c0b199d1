"""Conversions between Notes/Domino date-time values and Python values.

There is no way to ask a Notes date-time for its full zone offset: the
platform only exposes a whole number of hours, which is wrong for zones such
as Australian Central (+09:30) or Nepal (+05:45). ``to_offset_datetime``
therefore parses the value's zone-local and GMT renderings and takes the
difference. When the value's own zone doesn't matter, ``to_zoned_datetime_utc``
is faster and avoids text parsing altogether.

Creating Notes values needs a live session supplied by the caller; the
bridge never opens or closes one.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional

from ..convert import calendar_from_zoned, zoned_from_calendar
from ..core.config import get_default_timezone
from ..exceptions import UnresolvableZoneLabelError
from ..models import UTC, CalendarKind, CalendarValue, Instant
from .formats import FormatCache, parse_notes_text, strip_zone_token
from .protocols import NotesDateTime, NotesSession
from .zones import to_zone_info

logger = logging.getLogger(__name__)


class NotesBridge:
    """Converts Notes date-time values to and from Python values.

    The parse pattern for Notes renderings is built from the first session
    seen and cached in the bridge's FormatCache, which may be injected to
    share or pre-seed it.
    """

    def __init__(self, format_cache: Optional[FormatCache] = None) -> None:
        self.format_cache = format_cache or FormatCache()

    def _pattern_for(self, ndt: NotesDateTime) -> str:
        return self.format_cache.get_pattern(lambda: ndt.parent.international)

    def _parse_zone_time(self, ndt: NotesDateTime) -> datetime.datetime:
        # zone_time, not local time: we want the wall clock of the value's own
        # zone, not of the runtime's zone
        return parse_notes_text(strip_zone_token(ndt.zone_time), self._pattern_for(ndt))

    # From Notes

    def to_offset_datetime(self, ndt: NotesDateTime) -> datetime.datetime:
        """Convert to an aware datetime with the value's exact UTC offset.

        Raises:
            DateTimeTextParseError: If a rendering doesn't match the locale pattern
        """
        pattern = self._pattern_for(ndt)
        local = parse_notes_text(strip_zone_token(ndt.zone_time), pattern)
        gmt = parse_notes_text(strip_zone_token(ndt.gmt_time), pattern)

        # Truncate toward zero, as whole minutes between the two wall clocks
        minutes = int((local - gmt).total_seconds() / 60)
        offset = datetime.timezone(datetime.timedelta(minutes=minutes))
        logger.debug(
            "Reconstructed offset %s from %r / %r", offset, ndt.zone_time, ndt.gmt_time
        )
        return local.replace(tzinfo=offset)

    def to_zoned_datetime(self, ndt: NotesDateTime, notes_time_zone: str) -> datetime.datetime:
        """Convert using a known Notes time zone field instead of offset reconstruction.

        Raises:
            UnresolvableZoneLabelError: If the zone field has no IANA mapping
            DateTimeTextParseError: If the rendering doesn't match the locale pattern
        """
        zone = to_zone_info(notes_time_zone)
        if zone is None:
            raise UnresolvableZoneLabelError(notes_time_zone)
        return self._parse_zone_time(ndt).replace(tzinfo=zone)

    def to_zoned_datetime_utc(self, ndt: NotesDateTime) -> datetime.datetime:
        """Convert to a UTC datetime through the native accessor, skipping text parsing."""
        return ndt.to_datetime().astimezone(UTC)

    def to_instant(self, ndt: NotesDateTime) -> Instant:
        return Instant.from_datetime(ndt.to_datetime())

    def to_timestamp(self, ndt: NotesDateTime) -> float:
        return self.to_instant(ndt).timestamp()

    def to_calendar(self, ndt: NotesDateTime, notes_time_zone: str) -> CalendarValue:
        return calendar_from_zoned(self.to_zoned_datetime(ndt, notes_time_zone))

    def to_local_datetime(self, ndt: NotesDateTime) -> datetime.datetime:
        """Convert by discarding the zone information."""
        return self._parse_zone_time(ndt)

    def to_local_date(self, ndt: NotesDateTime) -> datetime.date:
        return self.to_local_datetime(ndt).date()

    def to_local_time(self, ndt: NotesDateTime) -> datetime.time:
        return self.to_local_datetime(ndt).time()

    # To Notes

    def from_instant(self, session: NotesSession, ins: Instant) -> NotesDateTime:
        return session.create_date_time(ins.to_datetime())

    def from_zoned(self, session: NotesSession, zdt: datetime.datetime) -> NotesDateTime:
        if zdt.tzinfo is None:
            raise ValueError(f"Expected a zoned datetime, got naive {zdt!r}")
        return session.create_date_time(zdt)

    def from_local_datetime(
        self, session: NotesSession, ldt: datetime.datetime
    ) -> NotesDateTime:
        """Create a Notes value in the host default zone."""
        return session.create_date_time(ldt.replace(tzinfo=get_default_timezone()))

    def from_local_date(self, session: NotesSession, d: datetime.date) -> NotesDateTime:
        """Create a Notes value with a wildcard time."""
        start = datetime.datetime.combine(d, datetime.time.min, tzinfo=get_default_timezone())
        ndt = session.create_date_time(start)
        ndt.set_any_time()
        return ndt

    def from_local_time(self, session: NotesSession, t: datetime.time) -> NotesDateTime:
        """Create a Notes value with a wildcard date."""
        today = datetime.date.today()
        value = datetime.datetime.combine(
            today, t.replace(tzinfo=None), tzinfo=get_default_timezone()
        )
        ndt = session.create_date_time(value)
        ndt.set_any_date()
        return ndt

    def from_calendar(self, session: NotesSession, cal: CalendarValue) -> NotesDateTime:
        """Create a Notes value from a calendar value.

        A date-only or time-only calendar produces a value with a wildcard
        time or date respectively.

        Raises:
            UnsupportedCalendarSystemError: If the calendar is not Gregorian
        """
        if cal.kind is CalendarKind.DATE_TIME:
            return session.create_date_time(zoned_from_calendar(cal))

        filled = CalendarValue(
            date=cal.date or datetime.date.today(),
            time=cal.time or datetime.time.min,
            tzinfo=cal.tzinfo,
            system=cal.system,
        )
        ndt = session.create_date_time(zoned_from_calendar(filled))
        if cal.kind is CalendarKind.DATE_ONLY:
            ndt.set_any_time()
        else:
            ndt.set_any_date()
        return ndt


# Default bridge for the convenience functions below
_bridge = NotesBridge()


def get_bridge() -> NotesBridge:
    """Get the shared NotesBridge used by the module-level functions."""
    return _bridge


def to_offset_datetime(ndt: NotesDateTime) -> datetime.datetime:
    """Convert a Notes value to an aware datetime with its exact offset."""
    return _bridge.to_offset_datetime(ndt)


def to_zoned_datetime(ndt: NotesDateTime, notes_time_zone: str) -> datetime.datetime:
    return _bridge.to_zoned_datetime(ndt, notes_time_zone)


def to_zoned_datetime_utc(ndt: NotesDateTime) -> datetime.datetime:
    return _bridge.to_zoned_datetime_utc(ndt)


def to_instant(ndt: NotesDateTime) -> Instant:
    return _bridge.to_instant(ndt)


def to_calendar(ndt: NotesDateTime, notes_time_zone: str) -> CalendarValue:
    return _bridge.to_calendar(ndt, notes_time_zone)


def to_local_datetime(ndt: NotesDateTime) -> datetime.datetime:
    return _bridge.to_local_datetime(ndt)


def to_local_date(ndt: NotesDateTime) -> datetime.date:
    return _bridge.to_local_date(ndt)


def to_local_time(ndt: NotesDateTime) -> datetime.time:
    return _bridge.to_local_time(ndt)
