"""
Queue loop: receive video tasks, run the pipeline, delete handled messages.
"""

from __future__ import annotations

import logging
import time

from assembly_shared import QueueReceiver

from .pipeline import TaskPipeline

logger = logging.getLogger(__name__)


def run_loop(
    receiver: QueueReceiver,
    pipeline: TaskPipeline,
    *,
    poll_interval_sec: float = 5.0,
    max_iterations: int | None = None,
) -> None:
    """
    Long-running loop: receive messages, handle each, delete after handling.

    Pipeline failures are reported inside handle(), so the message is deleted
    either way. An unexpected exception leaves the message on the queue; it
    becomes visible again after the visibility timeout.
    """
    logger.info("assembler loop started")
    iterations = 0
    while max_iterations is None or iterations < max_iterations:
        iterations += 1
        messages = receiver.receive(max_messages=1)
        if messages:
            logger.debug("runner: received %s message(s)", len(messages))
        for msg in messages:
            try:
                pipeline.handle(msg.body)
            except Exception as e:
                logger.exception("runner: failed to process message: %s", e)
                continue
            receiver.delete(msg.receipt_handle)
        if not messages:
            time.sleep(poll_interval_sec)
