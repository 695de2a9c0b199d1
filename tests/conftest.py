"""Shared fixtures for hodgepodge tests.

Provides in-memory stand-ins for the Notes session and date-time objects so
the bridge can be exercised without a Domino runtime.
"""

from __future__ import annotations

import datetime
import random
import zoneinfo
from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import pytest

from hodgepodge.models import LocaleSettings

UTC = datetime.timezone.utc

HODGEPODGE_ENV_VARS = (
    "HODGEPODGE_DEFAULT_TIMEZONE",
    "HODGEPODGE_TIME_SEP",
    "HODGEPODGE_DATE_SEP",
    "HODGEPODGE_DATE_ORDER",
    "HODGEPODGE_TIME_24_HOUR",
    "HODGEPODGE_DEBUG",
    "HODGEPODGE_LOG_LEVEL",
)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "critical_path: Core functionality tests")


def render_notes_text(dt: datetime.datetime, i18n: LocaleSettings, zone_token: str) -> str:
    """Render a datetime the way a Notes client with these settings would."""
    fields = {"y": str(dt.year), "m": str(dt.month), "d": str(dt.day)}
    if i18n.is_date_ymd:
        order = "ymd"
    elif i18n.is_date_dmy:
        order = "dmy"
    else:
        order = "mdy"
    date_part = i18n.date_sep.join(fields[c] for c in order)

    if i18n.is_time_24_hour:
        hour = f"{dt.hour:02d}"
        suffix = ""
    else:
        hour = str(dt.hour % 12 or 12)
        suffix = " " + (i18n.am_string if dt.hour < 12 else i18n.pm_string)
    time_part = i18n.time_sep.join([hour, f"{dt.minute:02d}", f"{dt.second:02d}"]) + suffix

    return f"{date_part} {time_part} {zone_token}"


@dataclass
class FakeNotesDateTime:
    """In-memory Notes date-time with fixed renderings."""

    parent: "FakeNotesSession"
    zone_time: str
    gmt_time: str
    instant: datetime.datetime
    source: Optional[datetime.datetime] = None
    any_date: bool = False
    any_time: bool = False

    def to_datetime(self) -> datetime.datetime:
        return self.instant

    def set_any_date(self) -> None:
        self.any_date = True

    def set_any_time(self) -> None:
        self.any_time = True


@dataclass
class FakeNotesSession:
    """In-memory Notes session that renders values with its locale settings."""

    international: LocaleSettings = field(default_factory=LocaleSettings)
    created: list[FakeNotesDateTime] = field(default_factory=list)

    def create_date_time(self, value: datetime.datetime) -> FakeNotesDateTime:
        zone_token = value.tzname() or "ZZZ"
        ndt = FakeNotesDateTime(
            parent=self,
            zone_time=render_notes_text(value, self.international, zone_token),
            gmt_time=render_notes_text(value.astimezone(UTC), self.international, "GMT"),
            instant=value.astimezone(UTC),
            source=value,
        )
        self.created.append(ndt)
        return ndt

    def from_text(
        self, zone_time: str, gmt_time: str, instant: datetime.datetime
    ) -> FakeNotesDateTime:
        """Wrap raw renderings, e.g. text captured from a real server."""
        return FakeNotesDateTime(
            parent=self, zone_time=zone_time, gmt_time=gmt_time, instant=instant
        )


@pytest.fixture
def us_settings() -> LocaleSettings:
    """US settings: month/day/year, 12-hour clock."""
    return LocaleSettings.from_order("MDY", time_sep=":", date_sep="/", is_time_24_hour=False)


@pytest.fixture
def german_settings() -> LocaleSettings:
    """German settings: day.month.year, 24-hour clock."""
    return LocaleSettings.from_order("DMY", time_sep=":", date_sep=".", is_time_24_hour=True)


@pytest.fixture
def japanese_settings() -> LocaleSettings:
    """Japanese settings: year-month-day, 24-hour clock."""
    return LocaleSettings.from_order("YMD", time_sep=":", date_sep="-", is_time_24_hour=True)


@pytest.fixture
def us_session(us_settings: LocaleSettings) -> FakeNotesSession:
    return FakeNotesSession(international=us_settings)


@pytest.fixture
def session_factory() -> Callable[[LocaleSettings], FakeNotesSession]:
    """Factory for sessions with arbitrary locale settings."""
    return lambda settings: FakeNotesSession(international=settings)


@pytest.fixture
def rand() -> random.Random:
    """Seeded random source so randomized round trips are reproducible."""
    return random.Random(20181010)


@pytest.fixture(scope="session")
def zone_ids() -> list[str]:
    """Every zone identifier available in the tz database, sorted."""
    return sorted(zoneinfo.available_timezones())


@pytest.fixture(autouse=True)
def clean_hodgepodge_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Clear HODGEPODGE_* variables so the host environment can't leak into tests."""
    for name in HODGEPODGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_shared_format_cache() -> Generator[None, Any, None]:
    """Reset the shared bridge's cached pattern between tests.

    Each test may use different locale settings; a pattern cached by one test
    must not be used to parse another test's renderings.
    """
    yield
    from hodgepodge.notes.bridge import get_bridge

    get_bridge().format_cache.reset()
