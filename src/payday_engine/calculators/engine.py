"""Pay calculation engine - main orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from payday_engine.calculators.holiday_allowance import HolidayAllowanceCalculator
from payday_engine.calculators.log_index import WorkLogIndex
from payday_engine.calculators.rate_resolver import RateResolver
from payday_engine.calculators.tax_calculator import TaxCalculator
from payday_engine.calculators.types import (
    Employee,
    PayDetail,
    PaymentType,
    WorkLog,
)
from payday_engine.utils.dates import month_bounds

logger = logging.getLogger(__name__)

NIGHT_PREMIUM = Decimal("0.5")


@dataclass
class EarningsTally:
    """Running totals while walking a month's work logs."""

    original_pay: Decimal = Decimal("0")
    base_pay: Decimal = Decimal("0")
    night_pay: Decimal = Decimal("0")
    work_hours: Decimal = Decimal("0")
    night_work_hours: Decimal = Decimal("0")


def _add_hourly(tally: EarningsTally, log: WorkLog, rate: Decimal) -> None:
    hours = log.worked_hours
    tally.work_hours += hours
    tally.base_pay += hours * rate
    tally.original_pay += hours * rate

    if log.is_night_shift:
        premium = hours * rate * NIGHT_PREMIUM
        tally.night_work_hours += hours
        tally.night_pay += premium
        tally.original_pay += premium


def _add_daily(tally: EarningsTally, log: WorkLog, rate: Decimal) -> None:
    # Flat day rate; hours and count are ignored
    tally.original_pay += rate
    tally.base_pay += rate


def _add_per_task(tally: EarningsTally, log: WorkLog, rate: Decimal) -> None:
    amount = log.task_count * rate
    tally.original_pay += amount
    tally.base_pay += amount


EARNING_RULES: dict[PaymentType, Callable[[EarningsTally, WorkLog, Decimal], None]] = {
    PaymentType.HOURLY: _add_hourly,
    PaymentType.DAILY: _add_daily,
    PaymentType.PER_TASK: _add_per_task,
}


class PayEngine:
    """Main pay calculation engine.

    Calculation pipeline (stable order per employee and month):
    1) Select the employee's logs dated within the month
    2) Build earnings from each log at its resolved rate
    3) Add the weekly holiday allowance (hourly + opted in)
    4) Resolve the month's tax rate and truncate withholding
    5) Deduct advances granted during the month

    The engine never mutates its inputs; identical inputs give identical
    PayDetail values.
    """

    def __init__(self, logs: Iterable[WorkLog] | WorkLogIndex):
        self.index = WorkLogIndex.of(logs)
        self.holiday_allowance = HolidayAllowanceCalculator(self.index)

    def calculate_pay(
        self, employee: Employee, reference_date: date | None = None
    ) -> PayDetail:
        """Calculate the pay breakdown for the month containing reference_date."""
        if reference_date is None:
            reference_date = date.today()

        month_start, month_end = month_bounds(reference_date)
        month_logs = self.index.between(employee.id, month_start, month_end)

        tally = self._build_earnings(employee, month_logs)
        holiday_allowance, weekly_details = self.holiday_allowance.calculate(
            employee, reference_date
        )

        total_before_tax = tally.original_pay + holiday_allowance
        applied_tax_rate = RateResolver.resolve_tax_rate(month_logs, employee)
        tax_amount = TaxCalculator.calculate_withholding(total_before_tax, applied_tax_rate)
        final_pay = total_before_tax - tax_amount

        total_advances = sum(
            (
                advance.amount
                for advance in employee.advances
                if month_start <= advance.date <= month_end
            ),
            Decimal("0"),
        )

        logger.debug(
            "Calculated %s pay for employee %s: %d logs, gross %s, tax %s @ %s%%",
            month_start.strftime("%Y-%m"),
            employee.id,
            len(month_logs),
            total_before_tax,
            tax_amount,
            applied_tax_rate,
        )

        return PayDetail(
            original_pay=tally.original_pay,
            holiday_allowance=holiday_allowance,
            total_before_tax=total_before_tax,
            tax_amount=tax_amount,
            final_pay=final_pay,
            weekly_details=tuple(weekly_details),
            total_work_hours=tally.work_hours,
            total_night_work_hours=tally.night_work_hours,
            base_pay=tally.base_pay,
            night_pay=tally.night_pay,
            total_advances=total_advances,
            net_pay=final_pay - total_advances,
            applied_tax_rate=applied_tax_rate,
            period_start=month_start,
            period_end=month_end,
        )

    def calculate_annual_pay(self, employee: Employee, year: int) -> PayDetail:
        """Sum the twelve monthly breakdowns of a year.

        Weekly details are dropped and advances are not aggregated, so
        net_pay equals final_pay in the yearly view.
        """
        monthly = [self.calculate_pay(employee, date(year, month, 1)) for month in range(1, 13)]

        def total(attr: str) -> Decimal:
            return sum((getattr(detail, attr) for detail in monthly), Decimal("0"))

        original_pay = total("original_pay")
        holiday_allowance = total("holiday_allowance")
        final_pay = total("final_pay")

        return PayDetail(
            original_pay=original_pay,
            holiday_allowance=holiday_allowance,
            total_before_tax=original_pay + holiday_allowance,
            tax_amount=total("tax_amount"),
            final_pay=final_pay,
            weekly_details=(),
            total_work_hours=total("total_work_hours"),
            total_night_work_hours=total("total_night_work_hours"),
            base_pay=total("base_pay"),
            night_pay=total("night_pay"),
            total_advances=Decimal("0"),
            net_pay=final_pay,
            applied_tax_rate=None,
            period_start=date(year, 1, 1),
            period_end=date(year, 12, 31),
        )

    def _build_earnings(
        self, employee: Employee, month_logs: Iterable[WorkLog]
    ) -> EarningsTally:
        """Sum each log's contribution at its resolved rate."""
        tally = EarningsTally()
        rule = EARNING_RULES.get(employee.payment_type)  # type: ignore[arg-type]
        if rule is None:
            logger.warning(
                "Unknown payment type %r for employee %s; no earnings computed",
                employee.payment_type,
                employee.id,
            )
            return tally

        for log in month_logs:
            rule(tally, log, RateResolver.resolve_rate(log, employee))
        return tally


def calculate_pay(
    employee: Employee,
    logs: Iterable[WorkLog] | WorkLogIndex,
    reference_date: date | None = None,
) -> PayDetail:
    """Monthly pay breakdown for one employee from the full log collection."""
    return PayEngine(logs).calculate_pay(employee, reference_date)


def calculate_annual_pay(
    employee: Employee,
    logs: Iterable[WorkLog] | WorkLogIndex,
    year: int,
) -> PayDetail:
    """Yearly pay breakdown, the sum of twelve monthly calculations."""
    return PayEngine(logs).calculate_annual_pay(employee, year)
