"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in kudos.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- to_iso(): Convert datetime object to ISO 8601 string
- period_start(): Start of an analytics period window ending now
"""
import calendar
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional

from kudos.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string ('Z' suffix for UTC), or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())

    formatted = dt.isoformat(timespec="milliseconds")
    if dt.utcoffset() == timedelta(0):
        return formatted.replace("+00:00", "Z")
    return formatted


def _subtract_months(dt: datetime, months: int) -> datetime:
    month_index = dt.month - 1 - months
    year = dt.year + month_index // 12
    month = month_index % 12 + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def period_start(period: str, reference: Optional[datetime] = None) -> datetime:
    """
    Start of the analytics window for a period name, counted back from now.

    daily/weekly are day offsets, monthly/quarterly/yearly are calendar
    offsets (clamped to the last day of the target month). Unknown names
    fall back to the last 30 days.

    Args:
        period: Period name, matched case-insensitively
        reference: End of the window (defaults to now())

    Returns:
        timezone-aware datetime marking the inclusive start of the window
    """
    end = reference or now()
    key = period.lower()

    if key == "daily":
        return end - timedelta(days=1)
    if key == "weekly":
        return end - timedelta(days=7)
    if key == "monthly":
        return _subtract_months(end, 1)
    if key == "quarterly":
        return _subtract_months(end, 3)
    if key == "yearly":
        return _subtract_months(end, 12)
    return end - timedelta(days=30)
