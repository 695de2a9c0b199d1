"""Notes/Domino date-time bridge: locale patterns, zone names and conversions."""

from .bridge import (
    NotesBridge,
    get_bridge,
    to_calendar,
    to_instant,
    to_local_date,
    to_local_datetime,
    to_local_time,
    to_offset_datetime,
    to_zoned_datetime,
    to_zoned_datetime_utc,
)
from .formats import FormatCache, build_format_pattern, parse_notes_text, strip_zone_token
from .zones import (
    decode_short_zone,
    extract_zone_label,
    short_zone_offset,
    to_iana_zone_name,
    to_zone_info,
)

__all__ = [
    "FormatCache",
    "NotesBridge",
    "build_format_pattern",
    "decode_short_zone",
    "extract_zone_label",
    "get_bridge",
    "parse_notes_text",
    "short_zone_offset",
    "strip_zone_token",
    "to_calendar",
    "to_iana_zone_name",
    "to_instant",
    "to_local_date",
    "to_local_datetime",
    "to_local_time",
    "to_offset_datetime",
    "to_zone_info",
    "to_zoned_datetime",
    "to_zoned_datetime_utc",
]
