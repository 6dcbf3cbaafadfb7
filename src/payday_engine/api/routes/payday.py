"""Payday countdown and reminder endpoints."""

from fastapi import APIRouter, status

from payday_engine.api.schemas import (
    PayDayBadgeRequest,
    PayDayBadgeResponse,
    PayDayNotificationRequest,
    PayDayNotificationResponse,
)
from payday_engine.services.payday import check_payday_notifications, classify_pay_day

router = APIRouter(prefix="/payday", tags=["payday"])


@router.post("/badge", response_model=PayDayBadgeResponse, status_code=status.HTTP_200_OK)
async def payday_badge(payload: PayDayBadgeRequest) -> PayDayBadgeResponse:
    """Days until the next payday and its urgency tier."""
    badge = classify_pay_day(payload.pay_day, payload.today)
    return PayDayBadgeResponse(
        pay_day=badge.pay_day,
        target_date=badge.target_date,
        days_remaining=badge.days_remaining,
        label=badge.label,
        tier=badge.tier.value if badge.tier else None,
    )


@router.post(
    "/notifications",
    response_model=PayDayNotificationResponse,
    status_code=status.HTTP_200_OK,
)
async def payday_notifications(
    payload: PayDayNotificationRequest,
) -> PayDayNotificationResponse:
    """Employees paid today or tomorrow, with the reminder text."""
    result = check_payday_notifications(
        [record.to_domain() for record in payload.employees], payload.today
    )
    return PayDayNotificationResponse(
        d_day_employee_ids=[emp.id for emp in result.d_day_employees],
        d_minus_one_employee_ids=[emp.id for emp in result.d_minus_one_employees],
        message=result.message,
    )
