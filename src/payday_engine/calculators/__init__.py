"""Pay calculation engine."""

from payday_engine.calculators.engine import PayEngine, calculate_annual_pay, calculate_pay
from payday_engine.calculators.holiday_allowance import HolidayAllowanceCalculator
from payday_engine.calculators.log_index import WorkLogIndex
from payday_engine.calculators.rate_resolver import RateResolver, resolve_rate, resolve_tax_rate
from payday_engine.calculators.tax_calculator import TaxCalculator
from payday_engine.calculators.types import (
    Advance,
    Employee,
    PayDetail,
    PaymentType,
    Snapshot,
    WeeklyDetail,
    WorkLog,
)

__all__ = [
    "Advance",
    "Employee",
    "HolidayAllowanceCalculator",
    "PayDetail",
    "PayEngine",
    "PaymentType",
    "RateResolver",
    "Snapshot",
    "TaxCalculator",
    "WeeklyDetail",
    "WorkLog",
    "WorkLogIndex",
    "calculate_annual_pay",
    "calculate_pay",
    "resolve_rate",
    "resolve_tax_rate",
]
