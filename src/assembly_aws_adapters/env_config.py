"""
Build AWS adapter instances from environment variables.

Required env vars:
- PROCESSED_VIDEOS_TABLE_NAME
- PROCESSING_ERRORS_TABLE_NAME
- VIDEO_TASKS_QUEUE_URL

Optional:
- AWS_REGION (default: boto3 resolution)
- AWS_ENDPOINT_URL (e.g. for LocalStack)
- SQS_LONG_POLL_WAIT_SECONDS (default: 20, max 20) for receive long polling
"""

import os

from .dynamodb_stores import DynamoErrorStore, DynamoProcessedVideosStore
from .sqs_queues import SQSQueueReceiver


def _sqs_wait_time_seconds() -> int:
    """Long-poll wait time for SQS receive (0-20). Default 20 for responsive pickup."""
    val = os.environ.get("SQS_LONG_POLL_WAIT_SECONDS", "20")
    return min(20, max(0, int(val)))


def _get_region() -> str | None:
    return os.environ.get("AWS_REGION") or None


def _get_endpoint_url() -> str | None:
    return os.environ.get("AWS_ENDPOINT_URL") or None


def ledger_store_from_env() -> DynamoProcessedVideosStore:
    """Build DynamoProcessedVideosStore from PROCESSED_VIDEOS_TABLE_NAME."""
    table_name = os.environ["PROCESSED_VIDEOS_TABLE_NAME"]
    return DynamoProcessedVideosStore(
        table_name,
        region_name=_get_region(),
        endpoint_url=_get_endpoint_url(),
    )


def error_store_from_env() -> DynamoErrorStore:
    """Build DynamoErrorStore from PROCESSING_ERRORS_TABLE_NAME."""
    table_name = os.environ["PROCESSING_ERRORS_TABLE_NAME"]
    return DynamoErrorStore(
        table_name,
        region_name=_get_region(),
        endpoint_url=_get_endpoint_url(),
    )


def video_tasks_queue_receiver_from_env() -> SQSQueueReceiver:
    """Build SQSQueueReceiver for the video-tasks queue from VIDEO_TASKS_QUEUE_URL."""
    url = os.environ["VIDEO_TASKS_QUEUE_URL"]
    return SQSQueueReceiver(
        url,
        region_name=_get_region(),
        endpoint_url=_get_endpoint_url(),
        wait_time_seconds=_sqs_wait_time_seconds(),
    )
