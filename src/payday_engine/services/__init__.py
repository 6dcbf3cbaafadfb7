"""Services around the pay engine: locking, scheduling, payday, transfers, backups."""

from payday_engine.services.backup import BackupFormatError, dump_backup, parse_backup
from payday_engine.services.locking_service import (
    DeleteScope,
    LockingService,
    WorkLogLockedError,
)
from payday_engine.services.payday import (
    PayDayBadge,
    UrgencyTier,
    check_payday_notifications,
    classify_pay_day,
)
from payday_engine.services.schedule_service import create_work_log, generate_repeat_logs
from payday_engine.services.transfer import TransferError, build_transfer_link, get_bank_code

__all__ = [
    "BackupFormatError",
    "DeleteScope",
    "LockingService",
    "PayDayBadge",
    "TransferError",
    "UrgencyTier",
    "WorkLogLockedError",
    "build_transfer_link",
    "check_payday_notifications",
    "classify_pay_day",
    "create_work_log",
    "dump_backup",
    "generate_repeat_logs",
    "get_bank_code",
    "parse_backup",
]
