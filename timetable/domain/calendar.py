"""Day ranges for the day tab bar."""

import calendar
from datetime import date, timedelta


def days_in_range(start: date, end: date) -> list[date]:
    """Every day from ``start`` to ``end`` inclusive; empty if ``end < start``."""
    return [start + timedelta(days=n) for n in range((end - start).days + 1)]


def month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)
