"""API route modules."""

from payday_engine.api.routes.health import router as health_router
from payday_engine.api.routes.pay import router as pay_router
from payday_engine.api.routes.payday import router as payday_router
from payday_engine.api.routes.utilities import router as utilities_router
from payday_engine.api.routes.work_logs import router as work_logs_router

__all__ = [
    "health_router",
    "pay_router",
    "payday_router",
    "utilities_router",
    "work_logs_router",
]
