"""
Korean public holidays for calendar display.
Uses workalendar's South Korea calendar, which covers the lunar holidays.
The pay engine never consults this module; holiday hours are paid normally.
"""
from datetime import date
from enum import Enum
from functools import lru_cache

from workalendar.asia import SouthKorea

_calendar = SouthKorea()


class DayColor(str, Enum):
    HOLIDAY = "holiday"  # Sundays and public holidays
    SATURDAY = "saturday"
    WEEKDAY = "weekday"


@lru_cache(maxsize=32)
def get_holidays(year: int) -> dict[date, str]:
    """All public holidays of a year, keyed by date."""
    return {d: name for d, name in _calendar.holidays(year)}


def get_holiday_name(day: date) -> str | None:
    return get_holidays(day.year).get(day)


def day_color(day: date) -> DayColor:
    if day.weekday() == 6 or get_holiday_name(day) is not None:
        return DayColor.HOLIDAY
    if day.weekday() == 5:
        return DayColor.SATURDAY
    return DayColor.WEEKDAY
