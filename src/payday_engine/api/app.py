"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from payday_engine.api.routes import (
    health_router,
    pay_router,
    payday_router,
    utilities_router,
    work_logs_router,
)
from payday_engine.config import settings
from payday_engine.services.backup import BackupFormatError
from payday_engine.services.locking_service import WorkLogLockedError
from payday_engine.services.transfer import TransferError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Payday Engine API",
        description="Small-business payroll tracking: monthly pay, holiday allowance, paydays",
        version=settings.engine_version,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(TransferError)
    async def transfer_error_handler(request: Request, exc: TransferError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.reason, "code": "TRANSFER_ERROR"},
        )

    @app.exception_handler(BackupFormatError)
    async def backup_error_handler(request: Request, exc: BackupFormatError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.reason, "code": "INVALID_BACKUP"},
        )

    @app.exception_handler(WorkLogLockedError)
    async def locked_error_handler(request: Request, exc: WorkLogLockedError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "code": "WORK_LOG_LOCKED"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(pay_router, prefix="/api/v1")
    app.include_router(payday_router, prefix="/api/v1")
    app.include_router(work_logs_router, prefix="/api/v1")
    app.include_router(utilities_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
