"""Type definitions for the pay calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


class PaymentType(str, Enum):
    """How an employee's rate is interpreted."""

    HOURLY = "HOURLY"  # amount per hour
    DAILY = "DAILY"  # amount per worked day
    PER_TASK = "PER_TASK"  # amount per task


def to_decimal(value: Any) -> Decimal | None:
    """Coerce a numeric input to Decimal, keeping None as None.

    Floats go through str() so that 3.3 becomes Decimal("3.3") rather than
    its binary expansion.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def coerce_payment_type(value: PaymentType | str) -> PaymentType | str:
    """Map a raw payment type onto the enum.

    Unrecognised values are kept as-is; the engine pays zero for them.
    """
    if isinstance(value, PaymentType):
        return value
    try:
        return PaymentType(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time copy of an employee's terms captured on a work log."""

    hourly_rate: Decimal | None = None
    tax_rate: Decimal | None = None
    employee_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hourly_rate", to_decimal(self.hourly_rate))
        object.__setattr__(self, "tax_rate", to_decimal(self.tax_rate))

    @classmethod
    def capture(cls, employee: Employee) -> Snapshot:
        """Freeze the employee's current rate, tax rate and name."""
        return cls(
            hourly_rate=employee.amount,
            tax_rate=employee.tax_rate,
            employee_name=employee.name,
        )


@dataclass(frozen=True)
class Advance:
    """Cash advance granted to an employee on a given day."""

    id: str
    amount: Decimal
    date: date
    memo: str | None = None
    created_at: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass(frozen=True)
class Employee:
    """Compensation configuration for one employee."""

    id: str
    payment_type: PaymentType | str
    amount: Decimal
    tax_rate: Decimal = Decimal("0")
    apply_holiday_allowance: bool = False
    advances: tuple[Advance, ...] = ()

    name: str = ""
    business_id: str | None = None
    bank_name: str = ""
    account_number: str = ""
    active: bool = True
    is_retired: bool = False
    pay_day: int | None = None  # 1-31, or 99 for the last day of the month
    created_at: int | None = None  # epoch milliseconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "payment_type", coerce_payment_type(self.payment_type))
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "tax_rate", to_decimal(self.tax_rate) or Decimal("0"))
        object.__setattr__(self, "advances", tuple(self.advances))

    @property
    def is_hourly(self) -> bool:
        return self.payment_type == PaymentType.HOURLY

    @property
    def receives_holiday_allowance(self) -> bool:
        """Weekly holiday allowance only applies to hourly workers who opted in."""
        return self.is_hourly and self.apply_holiday_allowance

    @property
    def is_active(self) -> bool:
        return self.active and not self.is_retired


@dataclass(frozen=True)
class WorkLog:
    """One work session for one employee on one calendar day."""

    id: str
    employee_id: str
    date: date
    hours: Decimal | None = None  # HOURLY
    count: Decimal | None = None  # DAILY / PER_TASK

    is_night_shift: bool = False
    is_locked: bool = False
    snapshot: Snapshot | None = None
    repeat_group_id: str | None = None

    business_id: str | None = None
    memo: str | None = None
    created_at: int | None = None  # epoch milliseconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "hours", to_decimal(self.hours))
        object.__setattr__(self, "count", to_decimal(self.count))

    @property
    def worked_hours(self) -> Decimal:
        return self.hours if self.hours is not None else Decimal("0")

    @property
    def task_count(self) -> Decimal:
        return self.count if self.count is not None else Decimal("1")

    def with_changes(self, **changes: Any) -> WorkLog:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class WeeklyDetail:
    """Holiday allowance breakdown for one Monday-start week."""

    week_range: str  # e.g. "9.29~10.5"
    week_start: date
    week_end: date
    work_hours: Decimal
    has_holiday_allowance: bool
    allowance_amount: Decimal


@dataclass(frozen=True)
class PayDetail:
    """Pay breakdown for one employee over a month or a year."""

    original_pay: Decimal
    holiday_allowance: Decimal
    total_before_tax: Decimal
    tax_amount: Decimal
    final_pay: Decimal

    weekly_details: tuple[WeeklyDetail, ...] = field(default_factory=tuple)

    total_work_hours: Decimal = Decimal("0")
    total_night_work_hours: Decimal = Decimal("0")
    base_pay: Decimal = Decimal("0")
    night_pay: Decimal = Decimal("0")

    total_advances: Decimal = Decimal("0")
    net_pay: Decimal = Decimal("0")

    applied_tax_rate: Decimal | None = None
    period_start: date | None = None
    period_end: date | None = None
