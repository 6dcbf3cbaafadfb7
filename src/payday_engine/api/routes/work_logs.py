"""Work log creation, locking and guarded edit endpoints."""

from fastapi import APIRouter, HTTPException, status

from payday_engine.api.schemas import (
    CreateLogRequest,
    DeleteLogRequest,
    ErrorResponse,
    LockMonthRequest,
    LockMonthResponse,
    RepeatLogsRequest,
    RepeatLogsResponse,
    UpdateLogRequest,
    WorkLogListResponse,
)
from payday_engine.calculators import WorkLog
from payday_engine.records import WorkLogRecord
from payday_engine.services.locking_service import LockingService
from payday_engine.services.schedule_service import create_work_log, generate_repeat_logs

router = APIRouter(prefix="/work-logs", tags=["work-logs"])


def _records(logs: list[WorkLog]) -> list[WorkLogRecord]:
    return [WorkLogRecord.from_domain(log) for log in logs]


@router.post("/lock", response_model=LockMonthResponse, status_code=status.HTTP_200_OK)
async def lock_month(payload: LockMonthRequest) -> LockMonthResponse:
    """Mark an employee's month as paid; returns the updated logs."""
    logs = LockingService.lock_month(
        [record.to_domain() for record in payload.work_logs],
        payload.employee_id,
        payload.reference_date,
    )
    return LockMonthResponse(
        locked=LockingService.is_month_locked(logs, payload.employee_id, payload.reference_date),
        work_logs=_records(logs),
    )


@router.post("/unlock", response_model=LockMonthResponse, status_code=status.HTTP_200_OK)
async def unlock_month(payload: LockMonthRequest) -> LockMonthResponse:
    """Cancel a paid mark; returns the updated logs."""
    logs = LockingService.unlock_month(
        [record.to_domain() for record in payload.work_logs],
        payload.employee_id,
        payload.reference_date,
    )
    return LockMonthResponse(locked=False, work_logs=_records(logs))


@router.post(
    "/update",
    response_model=WorkLogListResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_log(payload: UpdateLogRequest) -> WorkLogListResponse:
    """Replace one log unless its month is locked."""
    try:
        logs = LockingService.update_log(
            [record.to_domain() for record in payload.work_logs],
            payload.work_log.to_domain(),
        )
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Work log {payload.work_log.id} not found",
        )
    return WorkLogListResponse(work_logs=_records(logs))


@router.post(
    "/delete",
    response_model=WorkLogListResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_log(payload: DeleteLogRequest) -> WorkLogListResponse:
    """Remove a log, or part of its repeat group, unless any of them is locked."""
    try:
        logs = LockingService.delete_repeat_logs(
            [record.to_domain() for record in payload.work_logs],
            payload.work_log_id,
            payload.scope,
        )
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Work log {payload.work_log_id} not found",
        )
    return WorkLogListResponse(work_logs=_records(logs))


@router.post("", response_model=WorkLogRecord, status_code=status.HTTP_201_CREATED)
async def create_log(payload: CreateLogRequest) -> WorkLogRecord:
    """Create one log pinned to the employee's current rate and tax rate."""
    log = create_work_log(
        payload.employee.to_domain(),
        payload.date,
        payload.quantity,
        is_night_shift=payload.is_night_shift,
        memo=payload.memo,
    )
    return WorkLogRecord.from_domain(log)


@router.post("/repeat", response_model=RepeatLogsResponse, status_code=status.HTTP_201_CREATED)
async def repeat_logs(payload: RepeatLogsRequest) -> RepeatLogsResponse:
    """Create logs on the chosen weekdays, skipping days already worked."""
    result = generate_repeat_logs(
        payload.employee.to_domain(),
        [record.to_domain() for record in payload.work_logs],
        payload.start,
        set(payload.weekdays),
        payload.months,
        payload.quantity,
        is_night_shift=payload.is_night_shift,
        memo=payload.memo,
    )
    return RepeatLogsResponse(
        repeat_group_id=result.repeat_group_id,
        skipped_count=result.skipped_count,
        work_logs=_records(result.created),
    )
