"""Timestamp helpers.

Rows store naive datetimes expressed in the application timezone
(``APP_TIMEZONE``); entities and API responses carry aware values.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from volunteer_api.config import get_settings

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "UTC"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone, falling back to UTC."""

    name = (get_settings().app_timezone or "").strip() or FALLBACK_TIMEZONE
    if name.upper() == FALLBACK_TIMEZONE:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown APP_TIMEZONE %r, using %s", name, FALLBACK_TIMEZONE)
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current wall-clock time in the app timezone, as stored in the database."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach (naive input) or convert to (aware input) the app timezone."""

    if value is None:
        return None
    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None


def naive_day_range(
    start: date | None, end: date | None
) -> tuple[datetime | None, datetime | None]:
    """Translate inclusive calendar dates into naive ``[lower, upper)`` datetimes.

    ``end`` is inclusive, so the upper bound is midnight of the following day.
    """

    lower = datetime.combine(start, time.min) if start is not None else None
    upper = (
        datetime.combine(end + timedelta(days=1), time.min) if end is not None else None
    )
    return lower, upper


__all__ = [
    "FALLBACK_TIMEZONE",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "naive_day_range",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
