"""Display formatting and identifier helpers."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: Decimal | int | float) -> str:
    """Format won with thousands separators, e.g. 1234567 -> "1,234,567".

    Fractions are rounded half-up to whole won.
    """
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{value:,}"


def generate_id() -> str:
    return str(uuid.uuid4())


def now_millis() -> int:
    """Current time as epoch milliseconds, the records' createdAt unit."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)
