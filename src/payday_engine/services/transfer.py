"""Bank routing codes and payment-app deep links for salary transfers."""

from __future__ import annotations

import re
from decimal import Decimal
from urllib.parse import urlencode

from payday_engine.calculators.types import Employee

BANK_CODES: dict[str, str] = {
    "산업": "02",
    "기업": "03",
    "국민": "04",
    "수협": "07",
    "농협": "11",
    "단위농협": "12",
    "우리": "20",
    "SC": "23",
    "SC제일": "23",
    "대구": "31",
    "부산": "32",
    "광주": "34",
    "제주": "35",
    "전북": "37",
    "경남": "39",
    "새마을": "45",
    "신협": "48",
    "저축": "50",
    "우체국": "71",
    "하나": "81",
    "신한": "88",
    "케이": "89",
    "케이뱅크": "89",
    "카카오": "90",
    "카카오뱅크": "90",
    "토스": "92",
    "토스뱅크": "92",
}

TRANSFER_URL = "supertoss://send"

_BANK_SUFFIX = re.compile(r"(은행|bank)$", re.IGNORECASE)


class TransferError(Exception):
    """Raised when a transfer link cannot be built."""

    def __init__(self, employee_id: str, reason: str):
        self.employee_id = employee_id
        self.reason = reason
        super().__init__(f"Cannot transfer to employee {employee_id}: {reason}")


def normalize_bank_name(bank_name: str) -> str:
    """Drop whitespace and a trailing "은행"/"bank" suffix."""
    return _BANK_SUFFIX.sub("", re.sub(r"\s+", "", bank_name))


def get_bank_code(bank_name: str | None) -> str | None:
    """Resolve a bank routing code from a free-form bank name.

    Exact matches win; otherwise the first known name contained in the
    input is used, so "KB국민" resolves to 국민.
    """
    if not bank_name:
        return None

    normalized = normalize_bank_name(bank_name)
    if normalized in BANK_CODES:
        return BANK_CODES[normalized]

    for key, code in BANK_CODES.items():
        if key in normalized:
            return code
    return None


def build_transfer_link(employee: Employee, amount: Decimal | int) -> str:
    """Deep link that opens the payment app's send screen.

    Raises:
        TransferError: If amount is under one won or the bank is unknown
    """
    if int(amount) <= 0:
        raise TransferError(employee.id, "no pay to transfer")

    bank_code = get_bank_code(employee.bank_name)
    if bank_code is None:
        raise TransferError(employee.id, f"unsupported bank name {employee.bank_name!r}")

    query = urlencode(
        {
            "bankCode": bank_code,
            "accountNo": employee.account_number,
            "amount": str(int(amount)),
            "originAuth": "Y",
        }
    )
    return f"{TRANSFER_URL}?{query}"
