"""Environment-driven configuration for hodgepodge.

Recognized variables:
- HODGEPODGE_DEFAULT_TIMEZONE: IANA zone used as the host default zone
- HODGEPODGE_TIME_SEP / HODGEPODGE_DATE_SEP: Notes separators
- HODGEPODGE_DATE_ORDER: YMD, DMY or MDY
- HODGEPODGE_TIME_24_HOUR: truthy for a 24-hour clock
- HODGEPODGE_DEBUG / HODGEPODGE_LOG_LEVEL: see hodgepodge.core.logging
"""

from __future__ import annotations

import datetime
import logging
import os
import zoneinfo

from dateutil import tz

from ..models import LocaleSettings

logger = logging.getLogger(__name__)

ENV_DEFAULT_TIMEZONE = "HODGEPODGE_DEFAULT_TIMEZONE"
ENV_TIME_SEP = "HODGEPODGE_TIME_SEP"
ENV_DATE_SEP = "HODGEPODGE_DATE_SEP"
ENV_DATE_ORDER = "HODGEPODGE_DATE_ORDER"
ENV_TIME_24_HOUR = "HODGEPODGE_TIME_24_HOUR"

_TRUTHY = ("1", "true", "yes", "on")


def is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def get_default_timezone() -> datetime.tzinfo:
    """Get the host default time zone.

    HODGEPODGE_DEFAULT_TIMEZONE wins when it names a valid IANA zone. Otherwise
    the operating system's local zone is used via ``dateutil.tz.tzlocal``, which
    follows the host's daylight-saving rules.

    Returns:
        A tzinfo for the host default zone
    """
    configured = os.environ.get(ENV_DEFAULT_TIMEZONE)
    if configured:
        try:
            return zoneinfo.ZoneInfo(configured)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError):
            logger.warning(
                "Invalid %s=%r, falling back to the system zone", ENV_DEFAULT_TIMEZONE, configured
            )
    return tz.tzlocal()


def load_locale_settings(defaults: LocaleSettings | None = None) -> LocaleSettings:
    """Build LocaleSettings from the environment.

    Unset variables keep the value from ``defaults`` (US settings when None).

    Raises:
        MalformedLocaleConfigurationError: If HODGEPODGE_DATE_ORDER is not
            YMD, DMY or MDY.
    """
    base = defaults or LocaleSettings()
    order = os.environ.get(ENV_DATE_ORDER)
    if order is None:
        if base.is_date_ymd:
            order = "YMD"
        elif base.is_date_dmy:
            order = "DMY"
        else:
            order = "MDY"

    hour_flag = os.environ.get(ENV_TIME_24_HOUR)
    is_24 = base.is_time_24_hour if hour_flag is None else is_truthy(hour_flag)

    settings = LocaleSettings.from_order(
        order,
        time_sep=os.environ.get(ENV_TIME_SEP, base.time_sep),
        date_sep=os.environ.get(ENV_DATE_SEP, base.date_sep),
        is_time_24_hour=is_24,
        am_string=base.am_string,
        pm_string=base.pm_string,
    )
    logger.debug("Loaded locale settings: %s", settings)
    return settings
