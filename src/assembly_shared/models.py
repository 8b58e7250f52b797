"""Pydantic models for video tasks, ledger records, error records and process results."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Stage(str, Enum):
    """Pipeline stage a failure is attributed to."""

    DECODE = "decode"
    LEDGER = "ledger"
    MERGE = "merge"
    TRANSCODE = "transcode"


class VideoTask(BaseModel):
    """Payload of the video-tasks queue (sent by the upload service)."""

    model_config = ConfigDict(frozen=True)

    video_id: int = Field(..., strict=True, description="Unique video identifier")
    path: str = Field(..., description="Directory holding the uploaded chunk files")

    @field_validator("path")
    @classmethod
    def reject_nul(cls, v: str) -> str:
        if "\x00" in v:
            raise ValueError("path must not contain NUL characters")
        return v


class ProcessingRecord(BaseModel):
    """ProcessedVideos record: video_id is done."""

    video_id: int
    processed_at: int = Field(..., description="Unix timestamp when the video was marked done")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorRecord(BaseModel):
    """ProcessingErrors record: one failed attempt for a video."""

    video_id: int = Field(..., description="0 when the message could not be decoded")
    stage: Stage
    error: str = Field(..., description="Human-readable summary, e.g. 'Error merging chunks'")
    details: str = Field(..., description="Underlying error text")
    time: datetime = Field(default_factory=_utcnow, description="Capture time (UTC)")


class CommandResult(BaseModel):
    """Outcome of an external process call: exit status and combined stdout/stderr."""

    returncode: int
    output: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def output_text(self) -> str:
        return self.output.decode("utf-8", errors="replace")
