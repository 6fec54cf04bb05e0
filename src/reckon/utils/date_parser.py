"""Date parsing utilities."""

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as date_parser

_COMPACT_DATE_RE = re.compile(r"^\d{8}$")
_DATE_LIKE_RES = (
    re.compile(r"^\d{1,4}[-/.]\d{1,2}[-/.]\d{1,4}$"),
    re.compile(r"^\d{8}$"),
    re.compile(r"^[A-Za-z]{3,9}\.? \d{1,2},? \d{4}$"),
    re.compile(r"^\d{1,2}[ -][A-Za-z]{3,9}[ -]\d{2,4}$"),
)


def parse_date(date_str: str, date_format: Optional[str] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - An explicit strptime format, e.g. "%d/%m/%Y"
    - Compact dates: "20240115"
    - Anything dateutil understands: "2024-01-15", "January 15, 2024", etc.

    Args:
        date_str: Date string
        date_format: Optional strptime format that must match exactly

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = (date_str or "").strip()
    if not date_str:
        raise ValueError("Empty date string")

    if date_format:
        try:
            return datetime.strptime(date_str, date_format).date()
        except ValueError as e:
            raise ValueError(f"Could not parse date '{date_str}' with format '{date_format}': {e}")

    if _COMPACT_DATE_RE.match(date_str):
        try:
            return datetime.strptime(date_str, "%Y%m%d").date()
        except ValueError:
            pass

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def looks_like_date(text: str, date_format: Optional[str] = None) -> bool:
    """Return True if text is shaped like a date and parses as one.

    Used when guessing statement columns, where dateutil alone would accept
    plain numbers such as amounts.
    """
    text = (text or "").strip()
    if not text:
        return False
    if not date_format and not any(pattern.match(text) for pattern in _DATE_LIKE_RES):
        return False
    try:
        parse_date(text, date_format)
    except ValueError:
        return False
    return True
