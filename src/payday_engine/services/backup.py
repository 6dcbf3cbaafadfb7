"""Backup file parsing, legacy migration and export."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from payday_engine.calculators.types import Employee, WorkLog
from payday_engine.config import get_settings
from payday_engine.records import EmployeeRecord, WorkLogRecord

logger = logging.getLogger(__name__)


class BackupFormatError(Exception):
    """Raised when a backup payload does not have the expected shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid backup file: {reason}")


class BackupFile(BaseModel):
    """Top-level backup document: {employees, workLogs, backupDate}."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    employees: list[EmployeeRecord]
    work_logs: list[WorkLogRecord]
    backup_date: datetime | None = None


@dataclass
class BackupData:
    """Domain records restored from a backup."""

    employees: list[Employee]
    work_logs: list[WorkLog]
    backup_date: datetime | None
    migrated_count: int = 0
    duplicate_count: int = 0


def _dedupe(records: Iterable[Any]) -> tuple[list[Any], int]:
    """Keep the first record per id."""
    seen: set[str] = set()
    unique: list[Any] = []
    duplicates = 0
    for record in records:
        if record.id in seen:
            duplicates += 1
            continue
        seen.add(record.id)
        unique.append(record)
    return unique, duplicates


def parse_backup(
    payload: str | bytes | dict[str, Any],
    default_business_id: str | None = None,
) -> BackupData:
    """Parse and migrate a backup document.

    Records without a business id are assigned the fallback business, and
    duplicate ids are dropped (first occurrence wins).

    Raises:
        BackupFormatError: If the payload is not JSON or lacks employees/workLogs
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise BackupFormatError(f"not valid JSON ({e.msg})") from e

    if not isinstance(payload, dict) or "employees" not in payload or "workLogs" not in payload:
        raise BackupFormatError("expected an object with 'employees' and 'workLogs'")

    try:
        document = BackupFile.model_validate(payload)
    except ValidationError as e:
        raise BackupFormatError(str(e)) from e

    fallback = default_business_id or get_settings().default_business_id
    migrated = 0

    employee_records, employee_dupes = _dedupe(document.employees)
    log_records, log_dupes = _dedupe(document.work_logs)

    for record in (*employee_records, *log_records):
        if not record.business_id:
            record.business_id = fallback
            migrated += 1

    if migrated:
        logger.info("Migrated %d records to business %s", migrated, fallback)
    if employee_dupes or log_dupes:
        logger.warning(
            "Dropped %d duplicate employees and %d duplicate work logs",
            employee_dupes,
            log_dupes,
        )

    return BackupData(
        employees=[record.to_domain() for record in employee_records],
        work_logs=[record.to_domain() for record in log_records],
        backup_date=document.backup_date,
        migrated_count=migrated,
        duplicate_count=employee_dupes + log_dupes,
    )


def dump_backup(
    employees: Iterable[Employee],
    work_logs: Iterable[WorkLog],
    backup_date: datetime | None = None,
) -> dict[str, Any]:
    """Export records in the backup document shape."""
    document = BackupFile(
        employees=[EmployeeRecord.from_domain(emp) for emp in employees],
        work_logs=[WorkLogRecord.from_domain(log) for log in work_logs],
        backup_date=backup_date or datetime.now(timezone.utc),
    )
    return document.model_dump(mode="json", by_alias=True)
