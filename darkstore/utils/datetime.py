"""Clock helpers bound to the configured application timezone.

Timestamp columns are plain ``DateTime``: values are stored as naive wall
clock time of the application timezone and re-attached to it when read.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from darkstore.config import get_settings


@lru_cache(maxsize=1)
def app_timezone() -> ZoneInfo:
    """Return the zone named by ``APP_TIMEZONE`` (validated by the settings)."""

    return ZoneInfo(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current wall clock time in the app timezone, as stored in the database."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Read a stored or client supplied value as an aware app-timezone datetime.

    Naive values are taken to already be app-timezone wall clock time; aware
    values are converted.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=app_timezone())
    return value.astimezone(app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to the naive form written to the database."""

    aware = ensure_app_timezone(value)
    return aware.replace(tzinfo=None) if aware is not None else None
