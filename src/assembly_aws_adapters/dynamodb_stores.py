"""DynamoDB implementations of LedgerStore (ProcessedVideos) and ErrorStore (ProcessingErrors)."""

import time
import uuid
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError
from assembly_shared import ErrorRecord, ProcessingRecord, StoreError


def _record_to_item(record: ErrorRecord) -> dict[str, Any]:
    """Convert ErrorRecord to DynamoDB item (native types for resource API)."""
    d = record.model_dump(mode="json")
    d["error_id"] = f"{d['time']}#{uuid.uuid4().hex[:8]}"
    return d


def _item_to_record(item: dict[str, Any]) -> ErrorRecord:
    """Convert DynamoDB item to ErrorRecord."""
    return ErrorRecord.model_validate({k: v for k, v in item.items() if k != "error_id"})


class DynamoProcessedVideosStore:
    """LedgerStore: DynamoDB ProcessedVideos table keyed by video_id."""

    def __init__(
        self,
        table_name: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._table_name = table_name
        self._resource = boto3.resource(
            "dynamodb",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )
        self._table = self._resource.Table(table_name)

    def is_processed(self, video_id: int) -> bool:
        """Return True if a ProcessedVideos item exists for video_id (consistent read)."""
        try:
            resp = self._table.get_item(
                Key={"video_id": video_id},
                ConsistentRead=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise StoreError(f"{self._table_name}: get_item failed: {e}") from e
        return "Item" in resp

    def try_mark_processed(self, video_id: int) -> bool:
        """
        Create the ProcessedVideos item only if video_id does not exist (conditional create).
        Returns True if put succeeded, False if the item already exists.
        """
        record = ProcessingRecord(video_id=video_id, processed_at=int(time.time()))
        try:
            self._table.put_item(
                Item=record.model_dump(mode="json"),
                ConditionExpression="attribute_not_exists(video_id)",
            )
            return True
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            raise StoreError(f"{self._table_name}: put_item failed: {e}") from e
        except BotoCoreError as e:
            raise StoreError(f"{self._table_name}: put_item failed: {e}") from e


class DynamoErrorStore:
    """
    ErrorStore: DynamoDB ProcessingErrors table.

    Hash key video_id, range key error_id ("<iso time>#<random>") so the
    records of one video sort chronologically and retries never collide.
    """

    def __init__(
        self,
        table_name: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._table_name = table_name
        self._resource = boto3.resource(
            "dynamodb",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )
        self._table = self._resource.Table(table_name)

    def put(self, record: ErrorRecord) -> None:
        """Write one error record. Raises StoreError on backend failure."""
        try:
            self._table.put_item(Item=_record_to_item(record))
        except (ClientError, BotoCoreError) as e:
            raise StoreError(f"{self._table_name}: put_item failed: {e}") from e

    def list_for_video(self, video_id: int) -> list[ErrorRecord]:
        """Return all error records of the video, oldest first (follows LastEvaluatedKey)."""
        params: dict[str, Any] = {
            "KeyConditionExpression": Key("video_id").eq(video_id),
            "ScanIndexForward": True,
        }
        records: list[ErrorRecord] = []
        while True:
            try:
                resp = self._table.query(**params)
            except (ClientError, BotoCoreError) as e:
                raise StoreError(f"{self._table_name}: query failed: {e}") from e
            records.extend(_item_to_record(row) for row in resp.get("Items", []))
            next_key = resp.get("LastEvaluatedKey")
            if not next_key:
                return records
            params["ExclusiveStartKey"] = next_key
