# leaselib/utils.py - date parsing and timestamp helpers
from datetime import date, datetime, timedelta, timezone
import math

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MS = timedelta(milliseconds=1)


def parse_yyyy_mm_dd(text: str):
    try:
        return datetime.strptime(text.strip(), '%Y-%m-%d').date()
    except (AttributeError, ValueError):
        return None


def parse_datetime(text: str):
    """Parse an ISO-8601 date or datetime string, None when it is not one."""
    text = text.strip()
    d = parse_yyyy_mm_dd(text)
    if d is not None:
        return datetime(d.year, d.month, d.day)
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def days_between(start, end):
    return (end - start).days + 1


def is_missing(value) -> bool:
    return value is None or value == ''


def from_timestamp(ms: int) -> datetime:
    return EPOCH + ms * _MS


def to_timestamp(value):
    """Milliseconds since epoch for a date-like value.

    Accepts datetimes, dates, ISO strings and numeric milliseconds. Naive
    values are read as UTC. Returns None for missing or unreadable values.
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        ms = int(value)
        try:
            from_timestamp(ms)
        except OverflowError:
            return None
        return ms
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        dt = parse_datetime(value)
        if dt is None:
            return None
    else:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // _MS
