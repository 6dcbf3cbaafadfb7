"""Weekly holiday allowance (주휴수당) for hourly workers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from payday_engine.calculators.log_index import WorkLogIndex
from payday_engine.calculators.types import Employee, WeeklyDetail
from payday_engine.utils.dates import end_of_week, in_month, month_bounds, start_of_week

logger = logging.getLogger(__name__)

WEEKLY_HOURS_THRESHOLD = Decimal("15")
WEEKLY_HOURS_CAP = Decimal("40")
PAID_HOLIDAY_HOURS = Decimal("8")


@dataclass(frozen=True)
class Week:
    """A Monday-start calendar week."""

    start: date
    end: date

    @property
    def label(self) -> str:
        return f"{self.start.month}.{self.start.day}~{self.end.month}.{self.end.day}"


def month_weeks(reference_date: date) -> list[Week]:
    """Weeks covering the whole month, Monday on/before the 1st to Sunday on/after the last day."""
    month_start, month_end = month_bounds(reference_date)
    last_sunday = end_of_week(month_end)

    weeks: list[Week] = []
    monday = start_of_week(month_start)
    while monday <= last_sunday:
        weeks.append(Week(start=monday, end=monday + timedelta(days=6)))
        monday += timedelta(days=7)
    return weeks


class HolidayAllowanceCalculator:
    """Computes the weekly holiday allowance attributed to a month.

    Rules:
    - A week qualifies with at least 15 worked hours, night hours included
    - Allowance = min(hours, 40) / 40 * 8 * hourly rate
    - A week straddling two months belongs to the month holding its Sunday,
      and its hours are counted across the whole week
    - The rate is always the employee's current amount; log snapshots are
      not consulted here
    """

    def __init__(self, index: WorkLogIndex):
        self.index = index

    @staticmethod
    def weekly_allowance(weekly_hours: Decimal, hourly_rate: Decimal) -> Decimal:
        """Allowance for one week, zero below the threshold."""
        if weekly_hours < WEEKLY_HOURS_THRESHOLD:
            return Decimal("0")
        calc_hours = min(weekly_hours, WEEKLY_HOURS_CAP)
        return calc_hours / WEEKLY_HOURS_CAP * PAID_HOLIDAY_HOURS * hourly_rate

    def weekly_hours(self, employee: Employee, week: Week) -> Decimal:
        logs = self.index.between(employee.id, week.start, week.end)
        return sum((log.worked_hours for log in logs), Decimal("0"))

    def calculate(
        self, employee: Employee, reference_date: date
    ) -> tuple[Decimal, list[WeeklyDetail]]:
        """Total allowance and per-week details for the month of reference_date.

        Returns (0, []) unless the employee is hourly with the allowance enabled.
        """
        if not employee.receives_holiday_allowance:
            return Decimal("0"), []

        total = Decimal("0")
        details: list[WeeklyDetail] = []

        for week in month_weeks(reference_date):
            if not in_month(week.end, reference_date):
                continue

            hours = self.weekly_hours(employee, week)
            allowance = self.weekly_allowance(hours, employee.amount)
            total += allowance

            if hours > 0:
                details.append(
                    WeeklyDetail(
                        week_range=week.label,
                        week_start=week.start,
                        week_end=week.end,
                        work_hours=hours,
                        has_holiday_allowance=hours >= WEEKLY_HOURS_THRESHOLD,
                        allowance_amount=allowance,
                    )
                )

        logger.debug(
            "Holiday allowance for employee %s in %s: %s over %d weeks",
            employee.id,
            reference_date.strftime("%Y-%m"),
            total,
            len(details),
        )
        return total, details
