"""
Cloud-agnostic interfaces for the processed-videos ledger, the error store,
queues and external command execution.

Implementations (e.g. AWS via DynamoDB and SQS) live in separate packages
(assembly_aws_adapters). Pipeline logic depends on these interfaces and
receives the implementation at construction.
"""

from typing import Protocol, Sequence, runtime_checkable

from .models import CommandResult, ErrorRecord


class StoreError(Exception):
    """A store backend could not be reached or rejected the request."""


@runtime_checkable
class LedgerStore(Protocol):
    """Store for processed-video records (read; conditional create)."""

    def is_processed(self, video_id: int) -> bool:
        """Return True if a record exists for video_id. Raises StoreError on backend failure."""
        ...

    def try_mark_processed(self, video_id: int) -> bool:
        """
        Create the record only if none exists for video_id.

        Returns True if created, False if a record already existed.
        Raises StoreError on backend failure.
        """
        ...


@runtime_checkable
class ErrorStore(Protocol):
    """Append-only store for error records."""

    def put(self, record: ErrorRecord) -> None:
        """Write one error record. Raises StoreError on backend failure."""
        ...

    def list_for_video(self, video_id: int) -> list[ErrorRecord]:
        """Return all error records of the video, oldest first. Raises StoreError on backend failure."""
        ...


class QueueMessage:
    """A message received from a queue (body + receipt handle for delete)."""

    def __init__(self, receipt_handle: str, body: str | bytes) -> None:
        self.receipt_handle = receipt_handle
        self.body = body


@runtime_checkable
class QueueReceiver(Protocol):
    """Receive and delete messages from a queue."""

    def receive(self, max_messages: int = 1) -> list[QueueMessage]:
        """Receive up to max_messages. Returns empty list if none available."""
        ...

    def delete(self, receipt_handle: str) -> None:
        """Delete a message by its receipt handle after processing."""
        ...


@runtime_checkable
class CommandRunner(Protocol):
    """Run an external command to completion (blocking) and capture its combined output."""

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run args; raise OSError if the executable cannot be started."""
        ...
