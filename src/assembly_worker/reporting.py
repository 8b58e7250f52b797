"""
Error reporting: log a structured record and persist it to the ErrorStore.

report() never raises. A failing store is logged and otherwise ignored.
"""

from __future__ import annotations

import logging

from assembly_shared import ErrorRecord, ErrorStore, Stage

logger = logging.getLogger(__name__)


class ErrorReporter:
    def __init__(self, store: ErrorStore) -> None:
        self._store = store

    def report(self, video_id: int, stage: Stage, message: str, err: BaseException) -> ErrorRecord:
        record = ErrorRecord(
            video_id=video_id,
            stage=stage,
            error=message,
            details=str(err) or type(err).__name__,
        )
        logger.error("Processing error: %s", record.model_dump_json())
        try:
            self._store.put(record)
        except Exception:
            logger.warning(
                "reporting: video_id=%s failed to persist error record (stage=%s)",
                video_id,
                stage.value,
                exc_info=True,
            )
        return record
