"""Notes time zone names and abbreviations.

A Notes time zone field looks like ``Z=5 DO=1 DL=3 -1 1 11 1 1 ZX=25 ZN=Eastern``;
the label after ``ZN=`` is what gets mapped to an IANA identifier. Lookups
never raise: an unknown label or abbreviation gives None so callers can fall
back or report it.

Some Notes zones carry outdated rules. Samoa, for example, is still listed as
UTC-13 in Notes but maps to Pacific/Pago_Pago here (UTC-11), because the
Notes entry is for the American side of the date line. The IANA database is
taken as correct.
"""

from __future__ import annotations

import datetime
import logging
import re
import zoneinfo
from typing import Optional

logger = logging.getLogger(__name__)

ZONE_NAME_MARKER = "ZN="

# A real zone field always has other settings (Z=, DO=, ...) before the name
MIN_MARKER_INDEX = 8

# Notes zone label -> IANA zone identifier
NOTES_ZONE_MAP: dict[str, str] = {
    "Line Islands": "Etc/GMT-14",
    "UTC+13": "Etc/GMT-13",
    "Tonga": "Pacific/Tongatapu",
    "Samoa": "Pacific/Pago_Pago",
    "Chatham Islands": "Pacific/Chatham",
    "UTC+12": "Etc/GMT-12",
    "Russia Time Zone 11": "Asia/Magadan",
    "New Zealand": "Pacific/Auckland",
    "Kamchatka": "Asia/Kamchatka",
    "Fiji": "Pacific/Fiji",
    "Sakhalin": "Asia/Sakhalin",
    "Russia Time Zone 10": "Asia/Srednekolymsk",
    "Norfolk": "Pacific/Norfolk",
    "Magadan": "Asia/Magadan",
    "Central Pacific": "Pacific/Efate",
    "Bougainville": "Pacific/Bougainville",
    "Lord Howe": "Australia/Lord_Howe",
    "West Pacific": "Pacific/Guam",
    "Vladivostok": "Asia/Vladivostok",
    "Tasmania": "Australia/Hobart",
    "E. Australia": "Australia/Brisbane",
    "AUS Eastern": "Australia/Melbourne",
    "Cen. Australia": "Australia/Adelaide",
    "AUS Central": "Australia/Darwin",
    "Yakutsk": "Asia/Yakutsk",
    "Transbaikal": "Asia/Chita",
    "Tokyo": "Asia/Tokyo",
    "Korea": "Asia/Seoul",
    "Aus Central W.": "Australia/Eucla",
    "North Korea": "Asia/Pyongyang",
    "W. Australia": "Australia/Perth",
    "Ulaanbaatar": "Asia/Ulaanbaatar",
    "Taipei": "Asia/Taipei",
    "Singapore": "Asia/Singapore",
    "North Asia East": "Asia/Irkutsk",
    "China": "Asia/Shanghai",
    "W. Mongolia": "Asia/Hovd",
    "Tomsk": "Asia/Novosibirsk",
    "SE Asia": "Asia/Jakarta",
    "North Asia": "Asia/Krasnoyarsk",
    "N. Central Asia": "Asia/Novosibirsk",
    "Altai": "Asia/Hovd",
    "Myanmar": "Asia/Yangon",
    "Omsk": "Asia/Omsk",
    "Central Asia": "Asia/Dhaka",
    "Bangladesh": "Asia/Dhaka",
    "Nepal": "Asia/Kathmandu",
    "Sri Lanka": "Asia/Colombo",
    "India": "Asia/Kolkata",
    "West Asia": "Asia/Tashkent",
    "Pakistan": "Asia/Karachi",
    "Ekaterinburg": "Asia/Yekaterinburg",
    "Afghanistan": "Asia/Kabul",
    "Saratov": "Europe/Volgograd",
    "Russia Time Zone 3": "Europe/Samara",
    "Mauritius": "Indian/Mauritius",
    "Georgian": "Asia/Tbilisi",
    "Caucasus": "Asia/Yerevan",
    "Azerbaijan": "Asia/Baku",
    "Astrakhan": "Europe/Samara",
    "Arabian": "Asia/Dubai",
    "Iran": "Asia/Tehran",
    "Turkey": "Europe/Istanbul",
    "Russian": "Europe/Moscow",
    "E. Africa": "Africa/Nairobi",
    "Belarus": "Europe/Minsk",
    "Arabic": "Asia/Baghdad",
    "Arab": "Asia/Riyadh",
    "West Bank": "Asia/Gaza",
    "Syria": "Asia/Damascus",
    "Sudan": "Africa/Khartoum",
    "South Africa": "Africa/Johannesburg",
    "Namibia": "Africa/Windhoek",
    "Middle East": "Asia/Beirut",
    "Libya": "Africa/Tripoli",
    "Kaliningrad": "Europe/Kaliningrad",
    "Jordan": "Asia/Amman",
    "Israel": "Asia/Jerusalem",
    "GTB": "Europe/Istanbul",
    "FLE": "Europe/Riga",
    "Egypt": "Africa/Cairo",
    "E. Europe": "Europe/Minsk",
    "W. Europe": "Europe/Amsterdam",
    "W. Central Africa": "Africa/Lagos",
    "Central European": "Europe/Sarajevo",
    "Romance": "Europe/Brussels",
    "Central Europe": "Europe/Prague",
    "UTC": "UTC",
    "Morocco": "Africa/Casablanca",
    "Greenwich": "Africa/Monrovia",
    "GMT": "Europe/London",
    "Cape Verde": "Atlantic/Cape_Verde",
    "Azores": "Atlantic/Azores",
    "UTC-02": "Etc/GMT+2",
    "Mid-Atlantic": "Etc/GMT+2",
    "Tocantins": "America/Araguaina",
    "SA Eastern": "America/Cayenne",
    "Saint Pierre": "America/Miquelon",
    "Montevideo": "America/Montevideo",
    "Magallanes": "America/Santiago",
    "Greenland": "America/Danmarkshavn",
    "E. South America": "America/Sao_Paulo",
    "Bahia": "America/Bahia",
    "Argentina": "America/Argentina/Buenos_Aires",
    "Newfoundland": "America/St_Johns",
    "Venezuela": "America/Caracas",
    "SA Western": "America/La_Paz",
    "Paraguay": "America/Asuncion",
    "Pacific SA": "America/Santiago",
    "Central Brazilian": "America/Cuiaba",
    "Atlantic": "America/Halifax",
    "US Eastern": "America/Indiana/Indianapolis",
    "Turks And Caicos": "America/Grand_Turk",
    "SA Pacific": "America/Lima",
    "Haiti": "America/Port-au-Prince",
    "Eastern Standard Time (Mexico)": "America/Cancun",
    "Eastern": "America/New_York",
    "Cuba": "America/Havana",
    "Easter Island": "Pacific/Easter",
    "Central Standard Time (Mexico)": "America/Mexico_City",
    "Central": "America/Chicago",
    "Central America": "America/Costa_Rica",
    "Canada Central": "America/Regina",
    "US Mountain": "America/Phoenix",
    "Mountain Standard Time (Mexico)": "America/Chihuahua",
    "Mountain": "America/Denver",
    "UTC-08": "Etc/GMT+8",
    "Pacific Standard Time (Mexico)": "America/Tijuana",
    "Pacific": "America/Los_Angeles",
    "UTC-09": "Etc/GMT+9",
    "Alaskan": "America/Anchorage",
    "Marquesas": "Pacific/Marquesas",
    "Hawaiian": "Pacific/Honolulu",
    "Aleutian": "America/Adak",
    "UTC-11": "Etc/GMT+11",
    "Dateline": "Etc/GMT+12",
}

# Notes zone abbreviation -> UTC offset. Last resort only: abbreviations are
# ambiguous, see AMBIGUOUS_SHORT_ZONES.
SHORT_ZONE_OFFSETS: dict[str, str] = {
    "ADT": "-03:00",
    "AST": "-04:00",
    "BST": "-10:00",
    "CDT": "-05:00",
    "CEDT": "+02:00",
    "CET": "+01:00",
    "CST": "-06:00",
    "EDT": "-04:00",
    "EST": "-05:00",
    "GDT": "+01:00",
    "MDT": "-06:00",
    "MST": "-07:00",
    "NDT": "-02:30",
    "NST": "-03:30",
    "PDT": "-07:00",
    "PST": "-08:00",
    "YDT": "-08:00",
    "YST": "-09:00",
    "YW1": "-00:00",
    "YW2": "-01:00",
    "YW3": "-02:00",
    "ZE10": "+10:00",
    "ZE11": "+11:00",
    "ZE12": "+12:00",
    "ZE13": "+13:00",
    "ZE2": "+02:00",
    "ZE3": "+03:00",
    "ZE3B": "+03:30",
    "ZE4": "+04:00",
    "ZE4B": "+04:30",
    "ZE5": "+05:00",
    "ZE5B": "+05:30",
    "ZE5C": "+05:45",
    "ZE6": "+06:00",
    "ZE6B": "+06:30",
    "ZE7": "+07:00",
    "ZE8": "+08:00",
    "ZE9": "+09:00",
    "ZE9B": "+09:30",
    "ZW1": "-01:00",
    "ZW12": "-12:00",
    "ZW2": "-02:00",
    "ZW3": "-03:00",
}

# Abbreviations that stand for more than one real-world zone. The table keeps
# the Notes meaning; other readings are listed for callers that need to warn.
AMBIGUOUS_SHORT_ZONES: dict[str, tuple[str, ...]] = {
    "ADT": ("-03:00 Atlantic Daylight", "+04:00 Arabia Daylight"),
    "AST": ("-04:00 Atlantic Standard", "+03:00 Arabia Standard"),
    "BST": ("-10:00 Bering Standard", "+01:00 British Summer", "+06:00 Bangladesh Standard"),
    "CDT": ("-05:00 Central Daylight", "-04:00 Cuba Daylight"),
    "CST": ("-06:00 Central Standard", "+08:00 China Standard", "-05:00 Cuba Standard"),
    "EDT": ("-04:00 Eastern Daylight", "+11:00 Australian Eastern Daylight"),
    "EST": ("-05:00 Eastern Standard", "+10:00 Australian Eastern Standard"),
    "GDT": ("+01:00 Greenwich Daylight", "+11:00 Guam Daylight"),
    "NST": ("-03:30 Newfoundland Standard", "-11:00 Nome Standard"),
}

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")


def extract_zone_label(notes_time_zone: str) -> Optional[str]:
    """Extract the zone label following the last ``ZN=`` marker.

    Returns:
        The label, or None when the marker is missing or appears too early
        in the field to be a real zone definition
    """
    index = notes_time_zone.rfind(ZONE_NAME_MARKER)
    if index < MIN_MARKER_INDEX:
        return None
    return notes_time_zone[index + len(ZONE_NAME_MARKER) :]


def to_iana_zone_name(notes_time_zone: str) -> Optional[str]:
    """Convert a Notes time zone field to the closest IANA zone identifier.

    Args:
        notes_time_zone: Full Notes zone field, e.g. ``"Z=-9 DO=0 ZX=52 ZN=Tokyo"``

    Returns:
        IANA identifier (e.g. "Asia/Tokyo") or None if the label is unknown
    """
    label = extract_zone_label(notes_time_zone)
    if label is None:
        return None
    return NOTES_ZONE_MAP.get(label)


def to_zone_info(notes_time_zone: str) -> Optional[zoneinfo.ZoneInfo]:
    """Resolve a Notes time zone field to a ZoneInfo, or None if it can't be."""
    name = to_iana_zone_name(notes_time_zone)
    if name is None:
        return None
    try:
        return zoneinfo.ZoneInfo(name)
    except zoneinfo.ZoneInfoNotFoundError:
        logger.warning(
            "Zone %r for Notes zone %r is missing from the tz database", name, notes_time_zone
        )
        return None


def decode_short_zone(abbreviation: str) -> Optional[str]:
    """Convert a Notes zone abbreviation to a ``+hh:mm`` offset string.

    Don't use this except as a last resort: abbreviations are ambiguous.

    Returns:
        Offset string such as ``"-07:00"``, or None if unknown
    """
    return SHORT_ZONE_OFFSETS.get(abbreviation)


def short_zone_offset(abbreviation: str) -> Optional[datetime.timezone]:
    """Like decode_short_zone, but return a fixed-offset tzinfo."""
    offset = decode_short_zone(abbreviation)
    if offset is None:
        return None
    match = _OFFSET_RE.match(offset)
    if match is None:
        return None
    sign = -1 if match.group(1) == "-" else 1
    delta = datetime.timedelta(hours=int(match.group(2)), minutes=int(match.group(3)))
    return datetime.timezone(sign * delta)


def is_ambiguous_short_zone(abbreviation: str) -> bool:
    return abbreviation in AMBIGUOUS_SHORT_ZONES
