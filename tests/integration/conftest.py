"""Integration test fixtures for the HTTP API."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from payday_engine.api.app import create_app


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to a fresh app instance."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def employee_payload() -> dict[str, Any]:
    """Hourly employee at 10,000 won, 3.3% withholding, allowance on."""
    return {
        "id": "emp-1",
        "businessId": "1",
        "name": "김알바",
        "paymentType": "HOURLY",
        "amount": 10000,
        "bankName": "국민은행",
        "accountNumber": "123-456-789",
        "taxRate": 3.3,
        "applyHolidayAllowance": True,
        "payDay": 10,
        "advances": [],
    }


@pytest.fixture
def january_logs() -> list[dict[str, Any]]:
    """Five 4-hour days in the week of Jan 6, 2025 plus one night shift."""
    logs = [
        {
            "id": f"log-{day}",
            "businessId": "1",
            "employeeId": "emp-1",
            "date": f"2025-01-{day:02d}",
            "hours": 4,
        }
        for day in range(6, 11)
    ]
    logs.append(
        {
            "id": "log-night",
            "businessId": "1",
            "employeeId": "emp-1",
            "date": "2025-01-20",
            "hours": 2,
            "isNightShift": True,
        }
    )
    return logs
