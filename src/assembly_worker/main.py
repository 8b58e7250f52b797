"""
Entrypoint for the assembler worker. Wires AWS adapters from env and runs the loop.
"""

import logging

from assembly_aws_adapters.env_config import (
    error_store_from_env,
    ledger_store_from_env,
    video_tasks_queue_receiver_from_env,
)
from assembly_shared import configure_logging

from .config import get_settings
from .ledger import ProcessingLedger
from .pipeline import TaskPipeline
from .reporting import ErrorReporter
from .runner import run_loop
from .transcode import Transcoder


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info(
        "assembler starting; chunk_suffix=%s dash_dir=%s ffmpeg=%s",
        settings.chunk_suffix,
        settings.dash_dirname,
        settings.ffmpeg_bin,
    )
    pipeline = TaskPipeline(
        ProcessingLedger(ledger_store_from_env()),
        ErrorReporter(error_store_from_env()),
        Transcoder(ffmpeg_bin=settings.ffmpeg_bin, manifest_name=settings.manifest_name),
        settings=settings,
    )
    run_loop(
        video_tasks_queue_receiver_from_env(),
        pipeline,
        poll_interval_sec=settings.poll_interval_sec,
    )


if __name__ == "__main__":
    main()
