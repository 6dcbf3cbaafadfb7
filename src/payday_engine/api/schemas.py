"""Pydantic schemas for API request/response models."""

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from payday_engine.records import EmployeeRecord, Number, WorkLogRecord
from payday_engine.services.locking_service import DeleteScope


class ApiModel(BaseModel):
    """Base schema; camelCase on the wire to match the app's records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(ApiModel):
    """Error payload."""

    detail: str
    code: str


# ============================================================================
# Pay calculation schemas
# ============================================================================


class MonthlyPayRequest(ApiModel):
    """Monthly calculation input; work logs may span employees."""

    employee: EmployeeRecord
    work_logs: list[WorkLogRecord] = Field(default_factory=list)
    reference_date: dt.date | None = None


class AnnualPayRequest(ApiModel):
    """Yearly calculation input."""

    employee: EmployeeRecord
    work_logs: list[WorkLogRecord] = Field(default_factory=list)
    year: int = Field(ge=1900, le=9999)


class WeeklyDetailResponse(ApiModel):
    week_range: str
    week_start: dt.date
    week_end: dt.date
    work_hours: Number
    has_holiday_allowance: bool
    allowance_amount: Number


class PayDetailResponse(ApiModel):
    """Pay breakdown for a month or a year."""

    employee_id: str
    original_pay: Number
    holiday_allowance: Number
    total_before_tax: Number
    tax_amount: Number
    final_pay: Number
    weekly_details: list[WeeklyDetailResponse]
    total_work_hours: Number
    total_night_work_hours: Number
    base_pay: Number
    night_pay: Number
    total_advances: Number
    net_pay: Number
    applied_tax_rate: Number | None = None
    period_start: dt.date | None = None
    period_end: dt.date | None = None


# ============================================================================
# Payday schemas
# ============================================================================


class PayDayBadgeRequest(ApiModel):
    pay_day: int | None = Field(default=None, ge=1, le=99)
    today: dt.date | None = None


class PayDayBadgeResponse(ApiModel):
    pay_day: int | None
    target_date: dt.date | None
    days_remaining: int | None
    label: str
    tier: str | None


class PayDayNotificationRequest(ApiModel):
    employees: list[EmployeeRecord]
    today: dt.date | None = None


class PayDayNotificationResponse(ApiModel):
    d_day_employee_ids: list[str]
    d_minus_one_employee_ids: list[str]
    message: str | None


# ============================================================================
# Work log locking schemas
# ============================================================================


class LockMonthRequest(ApiModel):
    employee_id: str
    reference_date: dt.date
    work_logs: list[WorkLogRecord]


class LockMonthResponse(ApiModel):
    locked: bool
    work_logs: list[WorkLogRecord]


# ============================================================================
# Transfer and backup schemas
# ============================================================================


class TransferLinkRequest(ApiModel):
    employee: EmployeeRecord
    amount: Decimal


class TransferLinkResponse(ApiModel):
    bank_code: str
    url: str


class BackupSummaryResponse(ApiModel):
    employee_count: int
    work_log_count: int
    migrated_count: int
    duplicate_count: int
    backup_date: dt.datetime | None


class HolidayResponse(ApiModel):
    date: dt.date
    name: str


class UpdateLogRequest(ApiModel):
    work_logs: list[WorkLogRecord]
    work_log: WorkLogRecord


class DeleteLogRequest(ApiModel):
    """ONLY, FUTURE or ALL members of the log's repeat group."""

    work_logs: list[WorkLogRecord]
    work_log_id: str
    scope: DeleteScope = DeleteScope.ONLY


class WorkLogListResponse(ApiModel):
    work_logs: list[WorkLogRecord]


# ============================================================================
# Schedule schemas
# ============================================================================


class CreateLogRequest(ApiModel):
    """Hours for hourly employees, otherwise a day or task count."""

    employee: EmployeeRecord
    date: dt.date
    quantity: Decimal | None = None
    is_night_shift: bool = False
    memo: str | None = None


class RepeatLogsRequest(ApiModel):
    """Weekdays use Monday=0 through Sunday=6."""

    employee: EmployeeRecord
    work_logs: list[WorkLogRecord] = Field(default_factory=list)
    start: dt.date
    weekdays: list[Annotated[int, Field(ge=0, le=6)]] = Field(min_length=1)
    months: int = Field(ge=1, le=12)
    quantity: Decimal | None = None
    is_night_shift: bool = False
    memo: str | None = None


class RepeatLogsResponse(ApiModel):
    repeat_group_id: str
    skipped_count: int
    work_logs: list[WorkLogRecord]
