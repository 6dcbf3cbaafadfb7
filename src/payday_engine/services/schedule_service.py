"""Work log creation, including recurring schedules."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from payday_engine.calculators.types import Employee, Snapshot, WorkLog, to_decimal
from payday_engine.utils.dates import add_months
from payday_engine.utils.format import generate_id, now_millis

logger = logging.getLogger(__name__)


@dataclass
class RepeatResult:
    """Outcome of generating a recurring schedule."""

    repeat_group_id: str
    created: list[WorkLog] = field(default_factory=list)
    skipped_count: int = 0


def create_work_log(
    employee: Employee,
    day: date,
    quantity: Decimal | float | int | None = None,
    *,
    is_night_shift: bool = False,
    memo: str | None = None,
    business_id: str | None = None,
    repeat_group_id: str | None = None,
) -> WorkLog:
    """Create a work log pinned to the employee's current terms.

    For hourly employees quantity is hours (default 0); otherwise it is the
    day or task count (default 1).
    """
    value = to_decimal(quantity)
    if employee.is_hourly:
        hours, count = value or Decimal("0"), None
    else:
        hours, count = None, value or Decimal("1")

    return WorkLog(
        id=generate_id(),
        employee_id=employee.id,
        date=day,
        hours=hours,
        count=count,
        is_night_shift=is_night_shift,
        snapshot=Snapshot.capture(employee),
        repeat_group_id=repeat_group_id,
        business_id=business_id if business_id is not None else employee.business_id,
        memo=memo,
        created_at=now_millis(),
    )


def generate_repeat_logs(
    employee: Employee,
    existing_logs: Iterable[WorkLog],
    start: date,
    weekdays: Collection[int],
    months: int,
    quantity: Decimal | float | int | None = None,
    *,
    is_night_shift: bool = False,
    memo: str | None = None,
    business_id: str | None = None,
) -> RepeatResult:
    """Create logs on the given weekdays from start through start + months.

    Weekdays use date.weekday() numbering (Monday is 0). Days on which the
    employee already has a log are skipped and counted. All created logs
    share one repeat group id.
    """
    taken = {log.date for log in existing_logs if log.employee_id == employee.id}
    result = RepeatResult(repeat_group_id=f"repeat_{generate_id()}")

    end = add_months(start, months)
    day = start
    while day <= end:
        if day.weekday() in weekdays:
            if day in taken:
                result.skipped_count += 1
            else:
                result.created.append(
                    create_work_log(
                        employee,
                        day,
                        quantity,
                        is_night_shift=is_night_shift,
                        memo=memo,
                        business_id=business_id,
                        repeat_group_id=result.repeat_group_id,
                    )
                )
        day += timedelta(days=1)

    logger.info(
        "Generated %d repeating logs for employee %s (%d skipped)",
        len(result.created),
        employee.id,
        result.skipped_count,
    )
    return result
