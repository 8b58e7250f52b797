"""
Task pipeline: decode -> idempotency gate -> merge -> transcode -> mark processed.

Every failure is reported once through ErrorReporter with the stage it
happened in, and handle() returns normally. A failed video is not marked
processed, so a redelivered task runs again.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from assembly_shared import Stage, VideoTask

from .config import AssemblerSettings
from .errors import DecodeError, DuplicateMarkError, LedgerError, MergeError, TranscodeError
from .ledger import ProcessingLedger
from .merge import merge_chunks
from .reporting import ErrorReporter
from .transcode import Transcoder

logger = logging.getLogger(__name__)


def decode_task(body: str | bytes) -> VideoTask:
    """Parse a queue message body as VideoTask. Raises DecodeError."""
    try:
        return VideoTask.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


class TaskPipeline:
    """Assembles one uploaded video per message."""

    def __init__(
        self,
        ledger: ProcessingLedger,
        reporter: ErrorReporter,
        transcoder: Transcoder,
        *,
        settings: AssemblerSettings | None = None,
    ) -> None:
        self._ledger = ledger
        self._reporter = reporter
        self._transcoder = transcoder
        self._settings = settings or AssemblerSettings()

    def handle(self, body: str | bytes) -> None:
        try:
            task = decode_task(body)
        except DecodeError as e:
            self._reporter.report(0, Stage.DECODE, "Error decoding task", e)
            return
        video_id = task.video_id

        try:
            if self._ledger.is_processed(video_id):
                logger.info("pipeline: video_id=%s already processed", video_id)
                return
        except LedgerError as e:
            self._reporter.report(video_id, Stage.LEDGER, "Error checking processed state", e)
            return

        if not self._process(task):
            return

        try:
            self._ledger.mark_processed(video_id)
        except DuplicateMarkError:
            logger.info("pipeline: video_id=%s already processed by another worker", video_id)
            return
        except LedgerError as e:
            self._reporter.report(video_id, Stage.LEDGER, "Error marking video as processed", e)
            return

        logger.info("pipeline: video_id=%s video processing completed", video_id)

    def _process(self, task: VideoTask) -> bool:
        """Merge and transcode; report and return False on the first failing stage."""
        s = self._settings
        base = Path(task.path)
        merged_file = base / s.merged_filename
        dash_dir = base / s.dash_dirname

        logger.info("pipeline: video_id=%s merging chunks in %s", task.video_id, base)
        try:
            chunks = merge_chunks(base, merged_file, suffix=s.chunk_suffix)
        except MergeError as e:
            self._reporter.report(task.video_id, Stage.MERGE, "Error merging chunks", e)
            return False

        logger.info(
            "pipeline: video_id=%s merged %s chunks, converting to MPEG-DASH",
            task.video_id,
            len(chunks),
        )
        try:
            manifest = self._transcoder.transcode(merged_file, dash_dir)
        except TranscodeError as e:
            self._reporter.report(task.video_id, Stage.TRANSCODE, "Error converting video", e)
            return False

        logger.info("pipeline: video_id=%s manifest written to %s", task.video_id, manifest)
        return True
