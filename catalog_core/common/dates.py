"""
Date Utilities

Parsing of the date values that arrive in raw rows (date objects, datetimes,
ISO-8601 strings) and formatting of timestamps for canonical records.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional


def parse_date(value: Any) -> Optional[datetime]:
    """
    Convert a raw date value to a timezone-aware datetime.

    Naive values are treated as UTC. Date-only strings ("2024-01-15")
    become midnight UTC.

    Args:
        value: datetime, date, or ISO-8601 string

    Returns:
        Aware datetime, or None if the value is not a parsable date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat() only learned the "Z" suffix in 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_iso_string(value: datetime) -> str:
    """
    Format a datetime as a UTC ISO-8601 string with millisecond precision.

    Example:
        >>> to_iso_string(datetime(2024, 12, 31, tzinfo=timezone.utc))
        '2024-12-31T00:00:00.000Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
