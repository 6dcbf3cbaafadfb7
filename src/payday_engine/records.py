"""Pydantic models for the app's JSON record shapes (camelCase on the wire)."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from payday_engine.calculators.types import Advance, Employee, Snapshot, WorkLog


def _json_number(value: Decimal) -> int | float:
    """Emit whole amounts as ints and fractions as floats."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


Number = Annotated[Decimal, PlainSerializer(_json_number, return_type=int | float, when_used="json")]


class RecordBase(BaseModel):
    """Base for persisted record shapes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AdvanceRecord(RecordBase):
    id: str
    amount: Number
    date: dt.date
    memo: str | None = None
    created_at: int | None = None

    def to_domain(self) -> Advance:
        return Advance(
            id=self.id,
            amount=self.amount,
            date=self.date,
            memo=self.memo,
            created_at=self.created_at,
        )


class SnapshotRecord(RecordBase):
    hourly_rate: Number | None = None
    tax_rate: Number | None = None
    employee_name: str | None = None

    def to_domain(self) -> Snapshot:
        return Snapshot(
            hourly_rate=self.hourly_rate,
            tax_rate=self.tax_rate,
            employee_name=self.employee_name,
        )


class EmployeeRecord(RecordBase):
    """Employee as stored by the app and in backup files."""

    id: str
    business_id: str | None = None
    name: str = ""
    payment_type: str
    amount: Number
    bank_name: str = ""
    account_number: str = ""
    tax_rate: Number = Decimal("0")
    apply_holiday_allowance: bool = False
    active: bool = True
    is_retired: bool = False
    pay_day: int | None = Field(default=None, ge=1, le=99)
    advances: list[AdvanceRecord] = Field(default_factory=list)
    created_at: int | None = None

    def to_domain(self) -> Employee:
        return Employee(
            id=self.id,
            payment_type=self.payment_type,
            amount=self.amount,
            tax_rate=self.tax_rate,
            apply_holiday_allowance=self.apply_holiday_allowance,
            advances=tuple(advance.to_domain() for advance in self.advances),
            name=self.name,
            business_id=self.business_id,
            bank_name=self.bank_name,
            account_number=self.account_number,
            active=self.active,
            is_retired=self.is_retired,
            pay_day=self.pay_day,
            created_at=self.created_at,
        )

    @classmethod
    def from_domain(cls, employee: Employee) -> EmployeeRecord:
        payment_type = getattr(employee.payment_type, "value", employee.payment_type)
        return cls.model_validate(
            {
                **{
                    name: getattr(employee, name)
                    for name in (
                        "id",
                        "business_id",
                        "name",
                        "amount",
                        "bank_name",
                        "account_number",
                        "tax_rate",
                        "apply_holiday_allowance",
                        "active",
                        "is_retired",
                        "pay_day",
                        "created_at",
                    )
                },
                "payment_type": payment_type,
                "advances": [AdvanceRecord.model_validate(a) for a in employee.advances],
            }
        )


class WorkLogRecord(RecordBase):
    """Work log as stored by the app and in backup files."""

    id: str
    business_id: str | None = None
    employee_id: str
    date: dt.date
    hours: Number | None = None
    count: Number | None = None
    memo: str | None = None
    snapshot: SnapshotRecord | None = None
    is_night_shift: bool = False
    is_locked: bool = False
    repeat_group_id: str | None = None
    created_at: int | None = None

    def to_domain(self) -> WorkLog:
        return WorkLog(
            id=self.id,
            employee_id=self.employee_id,
            date=self.date,
            hours=self.hours,
            count=self.count,
            is_night_shift=self.is_night_shift,
            is_locked=self.is_locked,
            snapshot=self.snapshot.to_domain() if self.snapshot else None,
            repeat_group_id=self.repeat_group_id,
            business_id=self.business_id,
            memo=self.memo,
            created_at=self.created_at,
        )

    @classmethod
    def from_domain(cls, log: WorkLog) -> WorkLogRecord:
        return cls.model_validate(log)
