"""Calendar helpers shared by the engine and services."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(reference_date: date) -> tuple[date, date]:
    """First and last day of the month containing reference_date."""
    year, month = reference_date.year, reference_date.month
    return date(year, month, 1), date(year, month, last_day_of_month(year, month))


def start_of_week(day: date) -> date:
    """Monday on or before day."""
    return day - timedelta(days=day.weekday())


def end_of_week(day: date) -> date:
    """Sunday on or after day."""
    return start_of_week(day) + timedelta(days=6)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, clamping to the target month's last day."""
    return day + relativedelta(months=months)


def in_month(day: date, reference_date: date) -> bool:
    return day.year == reference_date.year and day.month == reference_date.month
