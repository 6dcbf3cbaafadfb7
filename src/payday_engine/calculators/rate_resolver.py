"""Rate resolution between per-log snapshots and current employee terms."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from payday_engine.calculators.types import Employee, WorkLog


class RateResolver:
    """Resolves the rates a calculation should use.

    Resolution priority:
    1. If the work log carries a snapshot value, use it
    2. Otherwise fall back to the employee's current configuration

    Snapshots are what keep already-earned pay stable when an employee's
    rate or tax rate is edited later.
    """

    @staticmethod
    def resolve_rate(log: WorkLog, employee: Employee) -> Decimal:
        """Resolve the pay rate for a single work log."""
        if log.snapshot is not None and log.snapshot.hourly_rate is not None:
            return log.snapshot.hourly_rate
        return employee.amount

    @staticmethod
    def resolve_tax_rate(month_logs: Sequence[WorkLog], employee: Employee) -> Decimal:
        """Resolve the withholding rate for a whole month.

        The chronologically last log of the month pins the rate. Logs on the
        same day keep their input order.
        """
        if not month_logs:
            return employee.tax_rate

        last_log = sorted(month_logs, key=lambda log: log.date)[-1]
        if last_log.snapshot is not None and last_log.snapshot.tax_rate is not None:
            return last_log.snapshot.tax_rate
        return employee.tax_rate


resolve_rate = RateResolver.resolve_rate
resolve_tax_rate = RateResolver.resolve_tax_rate
