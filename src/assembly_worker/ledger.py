"""Processed-videos ledger: idempotency gate over a LedgerStore."""

from __future__ import annotations

from assembly_shared import LedgerStore, StoreError

from .errors import DuplicateMarkError, LedgerError


class ProcessingLedger:
    """Read and append-only write of "video X is done" records."""

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def is_processed(self, video_id: int) -> bool:
        """Return True if video_id has a record. Absence means not processed."""
        try:
            return self._store.is_processed(video_id)
        except StoreError as e:
            raise LedgerError(f"Error checking processed state: {e}") from e

    def mark_processed(self, video_id: int) -> None:
        """
        Insert the record for video_id.

        Raises DuplicateMarkError if it already exists, LedgerError if the
        store fails.
        """
        try:
            created = self._store.try_mark_processed(video_id)
        except StoreError as e:
            raise LedgerError(f"Error marking video as processed: {e}") from e
        if not created:
            raise DuplicateMarkError(f"video_id={video_id} already marked processed")
