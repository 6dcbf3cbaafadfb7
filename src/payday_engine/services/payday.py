"""Payday proximity classification and D-day reminders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from payday_engine.calculators.types import Employee
from payday_engine.utils.dates import add_months, last_day_of_month

END_OF_MONTH = 99  # pay_day sentinel for "last day of the month"
DEFAULT_PAY_DAY = 1


class UrgencyTier(str, Enum):
    """Display tier for how close the next payday is."""

    D_DAY = "D_DAY"  # today
    D_1 = "D_1"  # tomorrow
    D_2_3 = "D_2_3"
    D_4_5 = "D_4_5"
    NORMAL = "NORMAL"  # six days or more


@dataclass(frozen=True)
class PayDayBadge:
    """Countdown to an employee's next payday."""

    pay_day: int | None
    target_date: date | None
    days_remaining: int | None
    label: str
    tier: UrgencyTier | None

    @property
    def is_unknown(self) -> bool:
        return self.pay_day is None


def resolve_pay_date(pay_day: int, year: int, month: int) -> date:
    """Payday within a given month, clamped to the month's last day."""
    last_day = last_day_of_month(year, month)
    if pay_day == END_OF_MONTH:
        return date(year, month, last_day)
    return date(year, month, min(pay_day, last_day))


def next_pay_date(pay_day: int, today: date) -> date:
    """This month's payday, or next month's once it has passed."""
    target = resolve_pay_date(pay_day, today.year, today.month)
    if target < today:
        next_month = add_months(today.replace(day=1), 1)
        target = resolve_pay_date(pay_day, next_month.year, next_month.month)
    return target


def urgency_tier(days_remaining: int) -> UrgencyTier:
    if days_remaining <= 0:
        return UrgencyTier.D_DAY
    if days_remaining == 1:
        return UrgencyTier.D_1
    if days_remaining <= 3:
        return UrgencyTier.D_2_3
    if days_remaining <= 5:
        return UrgencyTier.D_4_5
    return UrgencyTier.NORMAL


def classify_pay_day(pay_day: int | None, today: date | None = None) -> PayDayBadge:
    """Build the payday badge shown next to an employee.

    The label is "D-Day" on payday, otherwise the payday as "N일". For the
    end-of-month sentinel the resolved day number is shown.
    """
    if not pay_day:
        return PayDayBadge(
            pay_day=None, target_date=None, days_remaining=None, label="?", tier=None
        )

    today = today or date.today()
    target = next_pay_date(pay_day, today)
    days_remaining = max(0, (target - today).days)

    if days_remaining == 0:
        label = "D-Day"
    elif pay_day == END_OF_MONTH:
        label = f"{target.day}일"
    else:
        label = f"{pay_day}일"

    return PayDayBadge(
        pay_day=pay_day,
        target_date=target,
        days_remaining=days_remaining,
        label=label,
        tier=urgency_tier(days_remaining),
    )


@dataclass
class PayDayNotificationResult:
    """Employees whose payday is today or tomorrow, plus the notice text."""

    d_day_employees: list[Employee] = field(default_factory=list)
    d_minus_one_employees: list[Employee] = field(default_factory=list)
    message: str | None = None


def is_pay_day(pay_day: int | None, day: date) -> bool:
    """Whether day is the (clamped) payday of its own month."""
    target = resolve_pay_date(pay_day or DEFAULT_PAY_DAY, day.year, day.month)
    return target == day


def _names_phrase(employees: list[Employee]) -> str:
    extra = f" 외 {len(employees) - 1}명" if len(employees) > 1 else ""
    return f"{employees[0].name}님{extra}"


def check_payday_notifications(
    employees: Iterable[Employee], today: date | None = None
) -> PayDayNotificationResult:
    """Find active employees paid today or tomorrow.

    Retired and inactive employees are skipped. A missing payday counts as
    the 1st. The message names today's payees first and only mentions
    tomorrow when nobody is paid today.
    """
    today = today or date.today()
    tomorrow = today + timedelta(days=1)
    candidates = [emp for emp in employees if emp.is_active]

    result = PayDayNotificationResult(
        d_day_employees=[emp for emp in candidates if is_pay_day(emp.pay_day, today)],
        d_minus_one_employees=[emp for emp in candidates if is_pay_day(emp.pay_day, tomorrow)],
    )

    if result.d_day_employees:
        result.message = (
            f"오늘({today.day}일)은 {_names_phrase(result.d_day_employees)}의 월급날입니다! 💸"
        )
    elif result.d_minus_one_employees:
        result.message = (
            f"내일({tomorrow.day}일)은 {_names_phrase(result.d_minus_one_employees)}의 "
            "월급날입니다. 미리 준비하세요!"
        )

    return result
