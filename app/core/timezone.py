# backend/app/core/timezone.py
from datetime import datetime, date, timezone, timedelta

from app.core.config import settings

# Local timezone used for calendar-day logic (meditation streaks)
LOCAL_TZ = timezone(timedelta(hours=settings.APP_TZ_OFFSET_HOURS))


def utc_now() -> datetime:
    """Current time, UTC, timezone-aware"""
    return datetime.now(timezone.utc)


def ensure_aware(dt: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; treat those as UTC"""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def local_date(dt: datetime | None) -> date | None:
    """Calendar date of `dt` in the configured local timezone"""
    dt = ensure_aware(dt)
    if dt is None:
        return None
    return dt.astimezone(LOCAL_TZ).date()


def format_time(dt: datetime | None) -> str | None:
    """ISO string, always with an offset"""
    dt = ensure_aware(dt)
    if dt is None:
        return None
    return dt.isoformat()
