"""Date manipulation utilities"""

import re
from datetime import date, datetime, timedelta
from typing import List

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def generate_date_range(start: date, days: int) -> List[date]:
    """Generate `days` consecutive dates beginning at start"""
    return [start + timedelta(days=i) for i in range(days)]


def inclusive_day_count(start: date, end: date) -> int:
    """Calendar days from start to end, counting both ends (same day = 1)"""
    return (end - start).days + 1


def parse_iso_date(value: date | str) -> date:
    """
    Parse a calendar date given as a date, a datetime (time is dropped), or a
    string in exactly YYYY-MM-DD form.

    Raises:
        ValueError: If the value is not a valid calendar date in that form
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a YYYY-MM-DD string, got {type(value).__name__}")

    text = value.strip()
    if not ISO_DATE_PATTERN.fullmatch(text):
        raise ValueError(f"Expected a YYYY-MM-DD string, got {value!r}")
    return date.fromisoformat(text)
