"""Utilities for calendar dates in the fixed YYYY-MM-DD format."""

import re
from datetime import date

DATE_FORMAT = "%Y-%m-%d"

_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def today_str(today: date | None = None) -> str:
    """Get today's local date as YYYY-MM-DD."""
    return (today or date.today()).strftime(DATE_FORMAT)


def parse_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD string, returning None for anything else."""
    match = _DATE_PATTERN.match(value)
    if not match:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None


def is_overdue(value: str, today: date | None = None) -> bool:
    """Is the given date strictly before today?"""
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed < (today or date.today())


def is_today(value: str, today: date | None = None) -> bool:
    """Is the given date today?"""
    return value == today_str(today)


def is_due_or_overdue(value: str, today: date | None = None) -> bool:
    """Is the date today or earlier?"""
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed <= (today or date.today())


def format_date_short(value: str) -> str:
    """
    Format a date for display on a card.

    Example: "2026-02-13" -> "Feb 13". Unparsable values are returned unchanged.
    """
    parsed = parse_date(value)
    if parsed is None:
        return value
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}"
