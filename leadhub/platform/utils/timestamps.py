from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive values (SQLite drops tzinfo) and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Return the current time, nudged forward so it is strictly after ``previous``."""
    now = utcnow()
    if previous is None:
        return now
    previous = ensure_utc(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
