"""Read-only view over a work log collection, indexed by employee and date."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import defaultdict
from collections.abc import Iterable, Iterator
from datetime import date

from payday_engine.calculators.types import WorkLog


class WorkLogIndex:
    """Work logs grouped per employee and ordered by date.

    Ordering within a day follows the input order, so "the last log of the
    month" is well defined for tax-rate resolution.
    """

    def __init__(self, logs: Iterable[WorkLog]):
        grouped: dict[str, list[WorkLog]] = defaultdict(list)
        for log in logs:
            grouped[log.employee_id].append(log)

        self._logs: dict[str, tuple[WorkLog, ...]] = {}
        self._dates: dict[str, tuple[date, ...]] = {}
        for employee_id, employee_logs in grouped.items():
            ordered = tuple(sorted(employee_logs, key=lambda log: log.date))
            self._logs[employee_id] = ordered
            self._dates[employee_id] = tuple(log.date for log in ordered)

    @classmethod
    def of(cls, logs: Iterable[WorkLog] | WorkLogIndex) -> WorkLogIndex:
        """Wrap a raw collection, passing an existing index through."""
        if isinstance(logs, WorkLogIndex):
            return logs
        return cls(logs)

    def __len__(self) -> int:
        return sum(len(logs) for logs in self._logs.values())

    def __iter__(self) -> Iterator[WorkLog]:
        for logs in self._logs.values():
            yield from logs

    def for_employee(self, employee_id: str) -> tuple[WorkLog, ...]:
        return self._logs.get(employee_id, ())

    def between(self, employee_id: str, start: date, end: date) -> tuple[WorkLog, ...]:
        """Logs for an employee dated within [start, end], inclusive."""
        dates = self._dates.get(employee_id)
        if not dates:
            return ()
        lo = bisect_left(dates, start)
        hi = bisect_right(dates, end)
        return self._logs[employee_id][lo:hi]
