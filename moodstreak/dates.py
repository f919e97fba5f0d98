"""Date-key helpers — one canonical YYYY-MM-DD key per local calendar day."""
from __future__ import annotations

from datetime import date, datetime, timedelta


def _local_date(instant: date | datetime) -> date:
    if isinstance(instant, datetime):
        if instant.tzinfo is not None:
            instant = instant.astimezone()
        return instant.date()
    return instant


def date_key(instant: date | datetime) -> str:
    """Format the local calendar day of ``instant`` as YYYY-MM-DD."""
    d = _local_date(instant)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def today_key(now: date | datetime) -> str:
    return date_key(now)


def days_ago(now: date | datetime, n: int) -> date:
    # Subtract on dates, not seconds, so DST shifts never skip a day.
    return _local_date(now) - timedelta(days=n)


def days_ago_key(now: date | datetime, n: int) -> str:
    return date_key(days_ago(now, n))


def parse_date_key(key: str) -> date | None:
    """Return the date for a well-formed key, None for anything else."""
    if not isinstance(key, str) or len(key) != 10 or key[4] != "-" or key[7] != "-":
        return None
    try:
        return date.fromisoformat(key)
    except ValueError:
        return None


def format_date_label(key: str) -> str:
    """'2026-03-18' -> 'Wednesday, Mar 18'."""
    d = parse_date_key(key)
    if d is None:
        return key
    return f"{d.strftime('%A, %b')} {d.day}"


def format_time(timestamp: str) -> str:
    """ISO timestamp -> '9:30 AM' in local time, '' if unparseable."""
    if not timestamp:
        return ""
    try:
        dt = datetime.fromisoformat(timestamp)
    except (ValueError, TypeError):
        return ""
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime("%I:%M %p").lstrip("0")
