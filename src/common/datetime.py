"""Datetime utilities."""

from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import ParserError, parse as parse_date


def to_utc(value: datetime) -> datetime:
    """Return `value` in UTC, treating naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(value) -> Optional[datetime]:
    """Parse a free-form date string into a UTC datetime.

    Datetimes are passed through (normalized to UTC). Returns None for empty
    or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_utc(value)

    value = value.strip()
    if not value:
        return None

    try:
        return to_utc(parse_date(value))
    except (ParserError, ValueError, OverflowError):
        return None
