"""Pay calculation API endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, status

from payday_engine.api.schemas import (
    AnnualPayRequest,
    ErrorResponse,
    MonthlyPayRequest,
    PayDetailResponse,
)
from payday_engine.calculators import PayDetail, PayEngine

router = APIRouter(prefix="/pay", tags=["pay"])


def _to_response(employee_id: str, detail: PayDetail) -> PayDetailResponse:
    return PayDetailResponse.model_validate({"employee_id": employee_id, **asdict(detail)})


@router.post(
    "/monthly",
    response_model=PayDetailResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def calculate_monthly_pay(payload: MonthlyPayRequest) -> PayDetailResponse:
    """Pay breakdown for the month containing the reference date (today if omitted)."""
    employee = payload.employee.to_domain()
    engine = PayEngine(log.to_domain() for log in payload.work_logs)
    detail = engine.calculate_pay(employee, payload.reference_date)
    return _to_response(employee.id, detail)


@router.post(
    "/annual",
    response_model=PayDetailResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def calculate_annual_pay(payload: AnnualPayRequest) -> PayDetailResponse:
    """Sum of the twelve monthly breakdowns; advances are not deducted."""
    employee = payload.employee.to_domain()
    engine = PayEngine(log.to_domain() for log in payload.work_logs)
    detail = engine.calculate_annual_pay(employee, payload.year)
    return _to_response(employee.id, detail)
