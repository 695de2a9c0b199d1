"""Protocol definitions for the Notes/Domino objects the bridge talks to.

The bridge only relies on the members declared here. Any object that
provides them, a live Domino binding or a test fake, can be passed in.
"""

from __future__ import annotations

import datetime
from typing import Protocol


class International(Protocol):
    """Locale settings of a Notes session."""

    time_sep: str
    date_sep: str
    is_date_ymd: bool
    is_date_dmy: bool
    is_date_mdy: bool
    is_time_24_hour: bool
    am_string: str
    pm_string: str


class NotesSession(Protocol):
    """The session/factory that owns Notes date-time values."""

    @property
    def international(self) -> International:
        """Locale settings of the session."""
        ...

    def create_date_time(self, value: datetime.datetime) -> NotesDateTime:
        """Create a Notes date-time from an aware datetime.

        Args:
            value: Aware datetime; its zone becomes the Notes value's zone

        Returns:
            New Notes date-time object
        """
        ...


class NotesDateTime(Protocol):
    """A Notes date-time value."""

    @property
    def parent(self) -> NotesSession:
        """Session that created the value."""
        ...

    @property
    def zone_time(self) -> str:
        """Rendering in the value's own zone, e.g. "10/9/2018 11:10:09 PM MST"."""
        ...

    @property
    def gmt_time(self) -> str:
        """Rendering normalized to GMT, e.g. "10/10/2018 06:10:09 AM GMT"."""
        ...

    def to_datetime(self) -> datetime.datetime:
        """Return the value's instant as an aware UTC datetime."""
        ...

    def set_any_date(self) -> None:
        """Mark the date component as a wildcard."""
        ...

    def set_any_time(self) -> None:
        """Mark the time component as a wildcard."""
        ...
