"""Error taxonomy for the assembly pipeline. Every kind is terminal for the current task."""

from __future__ import annotations

from pathlib import Path


class AssemblyError(Exception):
    """Base class for pipeline failures."""


class DecodeError(AssemblyError):
    """Inbound message is not a valid video task."""


class MergeError(AssemblyError):
    """A chunk or the merged output could not be read or written."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class TranscodeError(AssemblyError):
    """ffmpeg could not be started or exited non-zero."""

    def __init__(self, message: str, *, returncode: int | None = None, output: str = "") -> None:
        detail = message
        if returncode is not None:
            detail += f" (exit status {returncode})"
        if output:
            detail += f", output: {output}"
        super().__init__(detail)
        self.returncode = returncode
        self.output = output


class LedgerError(AssemblyError):
    """Processed-videos store read or write failed."""


class DuplicateMarkError(LedgerError):
    """The video was already marked processed (concurrent duplicate)."""
