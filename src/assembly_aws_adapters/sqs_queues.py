"""SQS implementation of QueueReceiver for the video-tasks queue."""

import logging

import boto3
from assembly_shared import QueueMessage

logger = logging.getLogger(__name__)

# SQS caps a single ReceiveMessage call at 10 messages
_SQS_MAX_BATCH = 10


class SQSQueueReceiver:
    """QueueReceiver over one SQS queue; long-polls when wait_time_seconds > 0."""

    def __init__(
        self,
        queue_url: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        wait_time_seconds: int = 0,
    ) -> None:
        self._queue_url = queue_url
        self._wait_time_seconds = wait_time_seconds
        self._client = boto3.client(
            "sqs",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def receive(self, max_messages: int = 1) -> list[QueueMessage]:
        """Receive up to max_messages video-task bodies. Returns empty list if none available."""
        resp = self._client.receive_message(
            QueueUrl=self._queue_url,
            MaxNumberOfMessages=max(1, min(max_messages, _SQS_MAX_BATCH)),
            WaitTimeSeconds=self._wait_time_seconds,
        )
        received = [
            QueueMessage(receipt_handle=msg["ReceiptHandle"], body=msg["Body"])
            for msg in resp.get("Messages") or []
        ]
        logger.debug("sqs: received %s video task(s) from %s", len(received), self._queue_url)
        return received

    def delete(self, receipt_handle: str) -> None:
        """Acknowledge a handled video task."""
        self._client.delete_message(
            QueueUrl=self._queue_url,
            ReceiptHandle=receipt_handle,
        )
        logger.debug("sqs: deleted message %s", receipt_handle[:16])
