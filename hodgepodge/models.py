"""Value types handled by the hodgepodge conversions.

Python's own types cover most representations: aware ``datetime`` for zoned
date-times, ``date``/``time``/naive ``datetime`` for local values. This module
adds the ones the standard library lacks: a nanosecond ``Instant`` that is
always UTC, an explicitly partial ``CalendarValue``, and ``LocaleSettings``
describing how a Notes client renders dates.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import IncompleteCalendarError, MalformedLocaleConfigurationError

UTC = datetime.timezone.utc
EPOCH = datetime.datetime(1970, 1, 1, tzinfo=UTC)

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000


@dataclass(frozen=True, order=True)
class Instant:
    """A point on the UTC timeline with nanosecond resolution.

    ``seconds`` is the signed offset from the POSIX epoch and ``nanos`` the
    sub-second part, always in ``[0, 1e9)``. An Instant never carries a zone.
    """

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            carry, nanos = divmod(self.nanos, NANOS_PER_SECOND)
            object.__setattr__(self, "seconds", self.seconds + carry)
            object.__setattr__(self, "nanos", nanos)

    @classmethod
    def from_datetime(cls, dt: datetime.datetime) -> Instant:
        """Create an Instant from an aware datetime.

        Raises:
            ValueError: If ``dt`` is naive.
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"Expected an aware datetime, got naive {dt!r}")
        delta = dt - EPOCH
        seconds = delta.days * 86400 + delta.seconds
        return cls(seconds, delta.microseconds * NANOS_PER_MICRO)

    @classmethod
    def from_epoch_millis(cls, millis: int) -> Instant:
        seconds, ms = divmod(millis, 1000)
        return cls(seconds, ms * NANOS_PER_MILLI)

    @classmethod
    def from_timestamp(cls, timestamp: float) -> Instant:
        """Create an Instant from a POSIX timestamp, rounded to microseconds."""
        micros = round(timestamp * 1_000_000)
        seconds, us = divmod(micros, 1_000_000)
        return cls(seconds, us * NANOS_PER_MICRO)

    @classmethod
    def now(cls) -> Instant:
        return cls.from_datetime(datetime.datetime.now(UTC))

    @property
    def epoch_millis(self) -> int:
        return self.seconds * 1000 + self.nanos // NANOS_PER_MILLI

    def timestamp(self) -> float:
        return self.seconds + self.nanos / NANOS_PER_SECOND

    def to_datetime(self) -> datetime.datetime:
        """Return the instant as a UTC datetime (nanoseconds truncated to micros)."""
        return EPOCH + datetime.timedelta(
            seconds=self.seconds, microseconds=self.nanos // NANOS_PER_MICRO
        )

    def truncated_to_seconds(self) -> Instant:
        return Instant(self.seconds)

    def __str__(self) -> str:
        return self.to_datetime().isoformat().replace("+00:00", "Z")


class CalendarSystem(str, Enum):
    """Calendar system backing a CalendarValue."""

    GREGORIAN = "gregorian"
    JULIAN = "julian"
    BUDDHIST = "buddhist"
    JAPANESE_IMPERIAL = "japanese"
    HIJRI = "hijri"


class CalendarKind(str, Enum):
    """Which components of a CalendarValue are populated."""

    DATE_ONLY = "date_only"
    TIME_ONLY = "time_only"
    DATE_TIME = "date_time"


@dataclass
class CalendarValue:
    """A mutable point in time with an attached zone.

    A calendar may be deliberately incomplete: conversions from a local date
    or a local time only populate that component and leave the other one as
    None. Check ``kind`` (or ``is_complete``) before assuming both are set.
    """

    date: Optional[datetime.date] = None
    time: Optional[datetime.time] = None
    tzinfo: datetime.tzinfo = UTC
    system: CalendarSystem = field(default=CalendarSystem.GREGORIAN)

    def __post_init__(self) -> None:
        if self.date is None and self.time is None:
            raise IncompleteCalendarError("A calendar value needs a date, a time, or both")
        if self.time is not None and self.time.tzinfo is not None:
            self.time = self.time.replace(tzinfo=None)

    @property
    def kind(self) -> CalendarKind:
        if self.date is None:
            return CalendarKind.TIME_ONLY
        if self.time is None:
            return CalendarKind.DATE_ONLY
        return CalendarKind.DATE_TIME

    @property
    def is_complete(self) -> bool:
        return self.kind is CalendarKind.DATE_TIME

    def set_instant(self, instant: Instant) -> None:
        """Move the calendar to ``instant``, expressed in the calendar's zone."""
        local = instant.to_datetime().astimezone(self.tzinfo)
        self.date = local.date()
        self.time = local.time()

    def set_zone(self, tz: datetime.tzinfo) -> None:
        """Attach a different zone without moving the wall-clock fields."""
        self.tzinfo = tz


class LocaleSettings(BaseModel):
    """Notes International settings: how the client renders dates and times.

    Satisfies the ``International`` protocol, so it can stand in for a live
    session's settings in configuration and tests.
    """

    time_sep: str = Field(default=":", description="Separator between time fields")
    date_sep: str = Field(default="/", description="Separator between date fields")
    is_date_ymd: bool = Field(default=False, description="Year-month-day order")
    is_date_dmy: bool = Field(default=False, description="Day-month-year order")
    is_date_mdy: bool = Field(default=True, description="Month-day-year order")
    is_time_24_hour: bool = Field(default=False, description="24-hour clock")
    am_string: str = "AM"
    pm_string: str = "PM"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_order(
        cls,
        order: str,
        *,
        time_sep: str = ":",
        date_sep: str = "/",
        is_time_24_hour: bool = True,
        am_string: str = "AM",
        pm_string: str = "PM",
    ) -> LocaleSettings:
        """Build settings from an order code such as "MDY".

        Raises:
            MalformedLocaleConfigurationError: If ``order`` is not YMD, DMY or MDY.
        """
        code = order.strip().upper()
        if code not in ("YMD", "DMY", "MDY"):
            raise MalformedLocaleConfigurationError(
                f"Unknown date order {order!r}; expected YMD, DMY or MDY"
            )
        return cls(
            time_sep=time_sep,
            date_sep=date_sep,
            is_date_ymd=code == "YMD",
            is_date_dmy=code == "DMY",
            is_date_mdy=code == "MDY",
            is_time_24_hour=is_time_24_hour,
            am_string=am_string,
            pm_string=pm_string,
        )
