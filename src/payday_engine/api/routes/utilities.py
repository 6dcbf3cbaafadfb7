"""Transfer links, backup validation and holiday lookup endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Path, status

from payday_engine.api.dependencies import AppSettings
from payday_engine.api.schemas import (
    BackupSummaryResponse,
    ErrorResponse,
    HolidayResponse,
    TransferLinkRequest,
    TransferLinkResponse,
)
from payday_engine.services.backup import parse_backup
from payday_engine.services.transfer import build_transfer_link, get_bank_code
from payday_engine.utils.holidays import get_holidays

router = APIRouter(tags=["utilities"])


@router.post(
    "/transfers/link",
    response_model=TransferLinkResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def transfer_link(payload: TransferLinkRequest) -> TransferLinkResponse:
    """Deep link into the payment app for paying an employee."""
    employee = payload.employee.to_domain()
    url = build_transfer_link(employee, payload.amount)
    return TransferLinkResponse(bank_code=get_bank_code(employee.bank_name), url=url)


@router.post(
    "/backups/validate",
    response_model=BackupSummaryResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}},
)
async def validate_backup(
    settings: AppSettings,
    payload: dict[str, Any] = Body(...),
) -> BackupSummaryResponse:
    """Check a backup document and report what a restore would load."""
    data = parse_backup(payload, settings.default_business_id)
    return BackupSummaryResponse(
        employee_count=len(data.employees),
        work_log_count=len(data.work_logs),
        migrated_count=data.migrated_count,
        duplicate_count=data.duplicate_count,
        backup_date=data.backup_date,
    )


@router.get(
    "/holidays/{year}",
    response_model=list[HolidayResponse],
    status_code=status.HTTP_200_OK,
)
async def list_holidays(
    year: int = Path(..., ge=1950, le=2099),
) -> list[HolidayResponse]:
    """Public holidays of a year, in date order."""
    return [
        HolidayResponse(date=day, name=name)
        for day, name in sorted(get_holidays(year).items())
    ]
