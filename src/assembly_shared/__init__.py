"""Shared types and conventions for the dash-assembler video pipeline."""

from .interfaces import (
    CommandRunner,
    ErrorStore,
    LedgerStore,
    QueueMessage,
    QueueReceiver,
    StoreError,
)
from .logging_config import configure_logging
from .models import (
    CommandResult,
    ErrorRecord,
    ProcessingRecord,
    Stage,
    VideoTask,
)

__version__ = "0.1.0"
__all__ = [
    "CommandResult",
    "CommandRunner",
    "ErrorRecord",
    "ErrorStore",
    "LedgerStore",
    "ProcessingRecord",
    "QueueMessage",
    "QueueReceiver",
    "Stage",
    "StoreError",
    "VideoTask",
    "configure_logging",
]
