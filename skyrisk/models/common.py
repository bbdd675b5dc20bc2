"""Common types and helpers shared across models."""

from datetime import date
from typing import TypeAlias

RequestToken: TypeAlias = int


def parse_date(value: str | date) -> date:
    """Accept a date or a YYYY-MM-DD string."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def month_index(day: date) -> int:
    """Zero-based month index (January = 0)."""
    return day.month - 1
