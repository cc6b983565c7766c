"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in home_control.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- ensure_aware(): Normalize datetimes read back from MongoDB

The default clock handed to the device state updater and the registries is
now(), so usage log timestamps and device updated_at values share one timezone.
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone

from home_control.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def ensure_aware(dt: datetime) -> datetime:
    """Read naive datetimes as UTC (MongoDB returns naive UTC) and convert to the app timezone."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc).astimezone(_get_app_timezone())
    return dt
