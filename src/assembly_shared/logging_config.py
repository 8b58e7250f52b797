"""Logging setup for dash-assembler processes: one format, quiet AWS SDK loggers."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

# boto3/botocore/urllib3 log every request at DEBUG; keep them out of worker logs
NOISY_LOGGERS = ("boto3", "botocore", "urllib3", "s3transfer")


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger for this process. Call once at application startup.

    level accepts a logging constant or a name such as "debug" (LOG_LEVEL env).
    The AWS SDK loggers stay at WARNING whatever the worker level is.
    """
    if isinstance(level, str):
        level = level.strip().upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
