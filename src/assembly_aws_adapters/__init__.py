"""AWS implementations of dash-assembler store and queue interfaces."""

from .dynamodb_stores import DynamoErrorStore, DynamoProcessedVideosStore
from .env_config import (
    error_store_from_env,
    ledger_store_from_env,
    video_tasks_queue_receiver_from_env,
)
from .sqs_queues import SQSQueueReceiver

__all__ = [
    "DynamoErrorStore",
    "DynamoProcessedVideosStore",
    "SQSQueueReceiver",
    "error_store_from_env",
    "ledger_store_from_env",
    "video_tasks_queue_receiver_from_env",
]
