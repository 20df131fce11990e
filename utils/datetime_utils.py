# -*- coding: utf-8 -*-
"""
DateTime Utilities.

Conversion of the wizard's date values (QDate-derived dates, datetimes or
ISO strings) into the UTC timestamp string the backend expects.
"""

from datetime import datetime, date, timezone
from typing import Union, Optional

DateValue = Union[datetime, date, str, None]

# Date-only layouts accepted besides ISO-8601; the second is the display format
SLASH_DATE_FORMATS = ("%Y/%m/%d", "%d/%m/%Y")


class InvalidDateError(ValueError):
    """Raised when a date string cannot be parsed."""

    def __init__(self, value: str):
        super().__init__("Invalid date")
        self.value = value


def parse_date_value(value: DateValue) -> Optional[datetime]:
    """
    Convert a date-like value to an aware UTC datetime.

    Args:
        value: datetime, date, ISO-8601 string, a slash-separated date
            ('YYYY/MM/DD' or 'DD/MM/YYYY'), or None

    Returns:
        Aware datetime in UTC, or None when the value is empty

    Raises:
        InvalidDateError: if a non-empty string is not a valid date

    Examples:
        >>> parse_date_value('2024-01-15')
        datetime(2024, 1, 15, 0, 0, tzinfo=timezone.utc)
        >>> parse_date_value('2024-01-15T10:30:00+02:00')
        datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc)
        >>> parse_date_value('2024/01/15')
        datetime(2024, 1, 15, 0, 0, tzinfo=timezone.utc)
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat() only learned the "Z" suffix in 3.11
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            if "/" in text:
                parsed = _parse_slash_date(text)
            elif "T" in text or " " in text:
                parsed = datetime.fromisoformat(text)
            else:
                parsed = datetime.combine(date.fromisoformat(text), datetime.min.time())
        except ValueError:
            raise InvalidDateError(value)
    else:
        return None

    # Naive values are taken as UTC
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_slash_date(text: str) -> datetime:
    for fmt in SLASH_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"unsupported date layout: {text}")


def to_utc_timestamp(value: DateValue) -> Optional[str]:
    """
    Format a date-like value as 'YYYY-MM-DDTHH:MM:SS.mmmZ'.

    Returns None for empty values; raises InvalidDateError for bad strings.

    Examples:
        >>> to_utc_timestamp(date(2024, 3, 1))
        '2024-03-01T00:00:00.000Z'
    """
    parsed = parse_date_value(value)
    if parsed is None:
        return None
    return parsed.strftime("%Y-%m-%dT%H:%M:%S.") + f"{parsed.microsecond // 1000:03d}Z"


def format_display_date(value: DateValue, fmt: str = "%d/%m/%Y") -> str:
    """Format a date-like value for display; '-' when empty or invalid."""
    try:
        parsed = parse_date_value(value)
    except InvalidDateError:
        return "-"
    if parsed is None:
        return "-"
    return parsed.strftime(fmt)
