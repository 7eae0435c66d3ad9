from __future__ import annotations

from datetime import date, datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def format_locale_date(value: date) -> str:
    """Format as the en-US short date, e.g. ``3/7/2025``."""
    return f"{value.month}/{value.day}/{value.year}"


def format_locale_time(value: datetime) -> str:
    """Format as the en-US clock time, e.g. ``9:05:00 AM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d}:{value.second:02d} {suffix}"
