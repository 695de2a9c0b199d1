"""Conversions between instants, calendar values, zoned and local date-times.

Regarding instants: an Instant is always UTC. Every instant passed in is read
as UTC and every instant returned is UTC. Local values converted to instants
are assumed to be UTC unless a function says otherwise.

Regarding calendar values: these functions will happily hand back incomplete
CalendarValues, with just a date or just a time. Check ``CalendarValue.kind``
before relying on both components.

Only the Gregorian calendar is supported. Reading a CalendarValue backed by
any other calendar system raises UnsupportedCalendarSystemError.
"""

from __future__ import annotations

import datetime
from typing import Optional

from .core.config import get_default_timezone
from .exceptions import IncompleteCalendarError, UnsupportedCalendarSystemError
from .models import UTC, CalendarSystem, CalendarValue, Instant


def _require_gregorian(cal: CalendarValue) -> None:
    if cal.system is not CalendarSystem.GREGORIAN:
        raise UnsupportedCalendarSystemError(
            f"Cannot convert non-Gregorian calendars (got {cal.system.value})"
        )


def _require_date(cal: CalendarValue) -> datetime.date:
    if cal.date is None:
        raise IncompleteCalendarError("Calendar value has no date fields set")
    return cal.date


def _require_time(cal: CalendarValue) -> datetime.time:
    if cal.time is None:
        raise IncompleteCalendarError("Calendar value has no time fields set")
    return cal.time


def _require_aware(zdt: datetime.datetime) -> None:
    if zdt.tzinfo is None or zdt.utcoffset() is None:
        raise ValueError(f"Expected a zoned datetime, got naive {zdt!r}")


# Instants


def instant_from_calendar(cal: CalendarValue) -> Instant:
    """Converts a complete Gregorian calendar value to an Instant."""
    return Instant.from_datetime(zoned_from_calendar(cal))


def instant_from_zoned(zdt: datetime.datetime) -> Instant:
    _require_aware(zdt)
    return Instant.from_datetime(zdt)


def instant_from_local_date(d: datetime.date) -> Instant:
    """Converts a date to the Instant at the start of that day, UTC."""
    return Instant.from_datetime(datetime.datetime.combine(d, datetime.time.min, tzinfo=UTC))


def instant_from_local_time(
    t: datetime.time, on_date: Optional[datetime.date] = None
) -> Instant:
    """Merges a time of day onto a date (today by default) and reads it as UTC."""
    if on_date is None:
        on_date = datetime.date.today()
    return Instant.from_datetime(
        datetime.datetime.combine(on_date, t.replace(tzinfo=None), tzinfo=UTC)
    )


def instant_from_local_datetime(
    ldt: datetime.datetime, offset: datetime.tzinfo = UTC
) -> Instant:
    """Converts a naive datetime to an Instant.

    The value is assumed to already be UTC; no zone conversion happens unless
    an explicit fixed ``offset`` is supplied.
    """
    return Instant.from_datetime(ldt.replace(tzinfo=offset))


def instant_to_timestamp(ins: Instant) -> float:
    return ins.timestamp()


def instant_from_timestamp(timestamp: float) -> Instant:
    return Instant.from_timestamp(timestamp)


# Calendar values


def calendar_from_instant(ins: Instant, tz: datetime.tzinfo = UTC) -> CalendarValue:
    """Converts an Instant to a calendar in ``tz`` showing the same moment."""
    local = ins.to_datetime().astimezone(tz)
    return CalendarValue(date=local.date(), time=local.time(), tzinfo=tz)


def calendar_from_zoned(zdt: datetime.datetime) -> CalendarValue:
    _require_aware(zdt)
    return CalendarValue(date=zdt.date(), time=zdt.time(), tzinfo=zdt.tzinfo)


def calendar_from_local_date(d: datetime.date) -> CalendarValue:
    """Converts a date to a DATE_ONLY calendar in the host default zone.

    The result has no time fields until the caller sets them.
    """
    return CalendarValue(date=d, tzinfo=get_default_timezone())


def calendar_from_local_time(t: datetime.time) -> CalendarValue:
    """Converts a time of day to a TIME_ONLY calendar in the host default zone.

    The result has no date fields until the caller sets them.
    """
    return CalendarValue(time=t, tzinfo=get_default_timezone())


def calendar_from_local_datetime(ldt: datetime.datetime) -> CalendarValue:
    """Converts a naive datetime to a calendar in the host default zone."""
    return CalendarValue(date=ldt.date(), time=ldt.time(), tzinfo=get_default_timezone())


# Zoned date-times


def zoned_from_instant(
    ins: Instant, tz: Optional[datetime.tzinfo] = None
) -> datetime.datetime:
    """Converts an Instant to a zoned datetime, in UTC unless ``tz`` is given."""
    utc = ins.to_datetime()
    return utc if tz is None else utc.astimezone(tz)


def zoned_from_instant_local(ins: Instant) -> datetime.datetime:
    """Converts an Instant to the host default zone's offset at that instant.

    The result carries a fixed offset, not the host zone itself: it records
    the offset in force at that moment and does not follow later DST changes.
    """
    local = ins.to_datetime().astimezone(get_default_timezone())
    offset = local.utcoffset() or datetime.timedelta(0)
    return local.replace(tzinfo=datetime.timezone(offset))


def zoned_from_calendar(cal: CalendarValue) -> datetime.datetime:
    """Converts a complete calendar value to an aware datetime in its zone.

    Raises:
        UnsupportedCalendarSystemError: If the calendar is not Gregorian.
        IncompleteCalendarError: If the date or the time is missing.
    """
    _require_gregorian(cal)
    return datetime.datetime.combine(_require_date(cal), _require_time(cal), tzinfo=cal.tzinfo)


# Local values


def local_date_from_instant(ins: Instant) -> datetime.date:
    return ins.to_datetime().date()


def local_time_from_instant(ins: Instant) -> datetime.time:
    """Reads the instant in UTC and discards the date."""
    return ins.to_datetime().time()


def local_datetime_from_instant(ins: Instant) -> datetime.datetime:
    return ins.to_datetime().replace(tzinfo=None)


def local_date_from_calendar(cal: CalendarValue) -> datetime.date:
    """Only the year, month and day fields of the calendar are examined."""
    _require_gregorian(cal)
    return _require_date(cal)


def local_time_from_calendar(cal: CalendarValue) -> datetime.time:
    """Only the hour, minute and second fields are examined; the zone is ignored."""
    _require_gregorian(cal)
    return _require_time(cal)


def local_datetime_from_calendar(cal: CalendarValue) -> datetime.datetime:
    """Converts a calendar value to its wall-clock time in its own zone."""
    return zoned_from_calendar(cal).replace(tzinfo=None)


def local_date_from_zoned(zdt: datetime.datetime) -> datetime.date:
    return zdt.date()


def local_time_from_zoned(zdt: datetime.datetime) -> datetime.time:
    return zdt.time()


def local_datetime_from_zoned(zdt: datetime.datetime) -> datetime.datetime:
    return zdt.replace(tzinfo=None)
