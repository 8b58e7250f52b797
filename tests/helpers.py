"""Shared test helpers: in-memory stores and a fake command runner."""

import json
from pathlib import Path
from typing import Sequence

from assembly_shared import CommandResult, ErrorRecord, StoreError


def make_task_body(video_id: int, path: str | Path) -> str:
    return json.dumps({"video_id": video_id, "path": str(path)})


def write_chunks(directory: Path, contents: dict[str, bytes]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name, data in contents.items():
        (directory / name).write_bytes(data)


class InMemoryLedgerStore:
    def __init__(self, *, fail: bool = False) -> None:
        self.processed: set[int] = set()
        self.mark_calls = 0
        self.fail = fail

    def is_processed(self, video_id: int) -> bool:
        if self.fail:
            raise StoreError("store unreachable")
        return video_id in self.processed

    def try_mark_processed(self, video_id: int) -> bool:
        self.mark_calls += 1
        if self.fail:
            raise StoreError("store unreachable")
        if video_id in self.processed:
            return False
        self.processed.add(video_id)
        return True


class InMemoryErrorStore:
    def __init__(self) -> None:
        self.records: list[ErrorRecord] = []

    def put(self, record: ErrorRecord) -> None:
        self.records.append(record)

    def list_for_video(self, video_id: int) -> list[ErrorRecord]:
        return [r for r in self.records if r.video_id == video_id]


class FakeRunner:
    """CommandRunner that records argv and writes the manifest on success."""

    def __init__(self, returncode: int = 0, output: bytes = b"", *, start_error: Exception | None = None) -> None:
        self.returncode = returncode
        self.output = output
        self.start_error = start_error
        self.calls: list[list[str]] = []

    def run(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        if self.start_error is not None:
            raise self.start_error
        if self.returncode == 0:
            Path(args[-1]).write_text("<MPD/>")
        return CommandResult(returncode=self.returncode, output=self.output)
