"""Utility functions."""

from .dates import (
    format_date_short,
    is_due_or_overdue,
    is_overdue,
    is_today,
    parse_date,
    today_str,
)
from .observers import ObserverRegistry, SubscriptionHandle

__all__ = [
    "ObserverRegistry",
    "SubscriptionHandle",
    "format_date_short",
    "is_due_or_overdue",
    "is_overdue",
    "is_today",
    "parse_date",
    "today_str",
]
