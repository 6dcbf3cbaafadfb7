"""Pytest fixtures for payday engine tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from payday_engine.calculators import Employee, PaymentType
from tests.factories import make_employee


@pytest.fixture
def hourly_employee() -> Employee:
    return make_employee()


@pytest.fixture
def allowance_employee() -> Employee:
    """Hourly employee entitled to the weekly holiday allowance."""
    return make_employee(apply_holiday_allowance=True)


@pytest.fixture
def daily_employee() -> Employee:
    return make_employee(id="emp-daily", payment_type=PaymentType.DAILY, amount=Decimal("80000"))


@pytest.fixture
def task_employee() -> Employee:
    return make_employee(id="emp-task", payment_type=PaymentType.PER_TASK, amount=Decimal("5000"))
