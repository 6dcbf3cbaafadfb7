"""Work log locking for paid-out months."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from enum import Enum

from payday_engine.calculators.types import WorkLog
from payday_engine.utils.dates import month_bounds

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "date",
    "employee_id",
    "hours",
    "count",
    "is_night_shift",
    "memo",
    "business_id",
)


class DeleteScope(str, Enum):
    """Which members of a repeat group a delete removes."""

    ONLY = "ONLY"  # just the chosen log
    FUTURE = "FUTURE"  # the chosen log and later ones in its group
    ALL = "ALL"


class WorkLogLockedError(Exception):
    """Raised when a locked work log is edited or deleted."""

    def __init__(self, log_id: str, action: str):
        self.log_id = log_id
        self.action = action
        super().__init__(
            f"Cannot {action} work log {log_id}: its pay period is already paid"
        )


class LockingService:
    """Locks and unlocks an employee's work logs for a month.

    When a month is marked paid:
    1. Every log of that employee dated within the month is marked locked
    2. Locked logs reject further edits and deletes

    The pay engine ignores the flag; this service is the gate callers use
    before mutating a log. All operations return new collections.
    """

    @staticmethod
    def _set_locked(
        logs: Iterable[WorkLog], employee_id: str, reference_date: date, locked: bool
    ) -> list[WorkLog]:
        start, end = month_bounds(reference_date)
        changed = 0
        result: list[WorkLog] = []
        for log in logs:
            if log.employee_id == employee_id and start <= log.date <= end:
                if log.is_locked != locked:
                    changed += 1
                result.append(log.with_changes(is_locked=locked))
            else:
                result.append(log)

        logger.info(
            "%s %d work logs for employee %s in %s",
            "Locked" if locked else "Unlocked",
            changed,
            employee_id,
            start.strftime("%Y-%m"),
        )
        return result

    @classmethod
    def lock_month(
        cls, logs: Iterable[WorkLog], employee_id: str, reference_date: date
    ) -> list[WorkLog]:
        """Mark the employee's month as paid."""
        return cls._set_locked(logs, employee_id, reference_date, True)

    @classmethod
    def unlock_month(
        cls, logs: Iterable[WorkLog], employee_id: str, reference_date: date
    ) -> list[WorkLog]:
        """Cancel a paid mark so the month's logs can be edited again."""
        return cls._set_locked(logs, employee_id, reference_date, False)

    @staticmethod
    def is_month_locked(
        logs: Iterable[WorkLog], employee_id: str, reference_date: date
    ) -> bool:
        """True when the month has logs for the employee and all are locked."""
        start, end = month_bounds(reference_date)
        month_logs = [
            log for log in logs if log.employee_id == employee_id and start <= log.date <= end
        ]
        if not month_logs:
            return False
        return all(log.is_locked for log in month_logs)

    @staticmethod
    def ensure_editable(log: WorkLog, action: str = "edit") -> None:
        if log.is_locked:
            raise WorkLogLockedError(log.id, action)

    @classmethod
    def update_log(cls, logs: Sequence[WorkLog], updated: WorkLog) -> list[WorkLog]:
        """Apply an edit to a stored log.

        Only EDITABLE_FIELDS are taken from the edit; the lock flag, repeat
        group and creation time stay as stored. An existing snapshot is kept.

        Raises:
            WorkLogLockedError: If the stored log is locked
            KeyError: If no log has that id
        """
        result: list[WorkLog] = []
        found = False
        for log in logs:
            if log.id == updated.id:
                cls.ensure_editable(log, "edit")
                found = True
                result.append(
                    log.with_changes(
                        **{name: getattr(updated, name) for name in EDITABLE_FIELDS},
                        snapshot=log.snapshot or updated.snapshot,
                    )
                )
            else:
                result.append(log)

        if not found:
            raise KeyError(updated.id)
        return result

    @classmethod
    def delete_log(cls, logs: Sequence[WorkLog], log_id: str) -> list[WorkLog]:
        """Remove a log by id.

        Raises:
            WorkLogLockedError: If the log is locked
            KeyError: If no log has that id
        """
        target = next((log for log in logs if log.id == log_id), None)
        if target is None:
            raise KeyError(log_id)
        cls.ensure_editable(target, "delete")
        return [log for log in logs if log.id != log_id]

    @classmethod
    def delete_repeat_logs(
        cls,
        logs: Sequence[WorkLog],
        log_id: str,
        scope: DeleteScope = DeleteScope.ONLY,
    ) -> list[WorkLog]:
        """Remove a log, optionally with the rest of its repeat group.

        A log outside any repeat group is removed on its own whatever the
        scope. Nothing is removed if any targeted log is locked.

        Raises:
            WorkLogLockedError: If a targeted log is locked
            KeyError: If no log has that id
        """
        target = next((log for log in logs if log.id == log_id), None)
        if target is None:
            raise KeyError(log_id)

        group = target.repeat_group_id
        if scope == DeleteScope.ONLY or group is None:
            doomed = [target]
        elif scope == DeleteScope.FUTURE:
            doomed = [
                log for log in logs if log.repeat_group_id == group and log.date >= target.date
            ]
        else:
            doomed = [log for log in logs if log.repeat_group_id == group]

        for log in doomed:
            cls.ensure_editable(log, "delete")

        doomed_ids = {log.id for log in doomed}
        logger.info(
            "Deleted %d work logs (%s) starting from %s", len(doomed_ids), scope.value, log_id
        )
        return [log for log in logs if log.id not in doomed_ids]
