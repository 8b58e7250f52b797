"""
App config from environment with defaults.
Uses pydantic-settings so all env vars are validated and documented in one model.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssemblerSettings(BaseSettings):
    """
    All environment variables used by the assembler worker.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Upload layout: chunk files and the merged artifact live in the task path
    chunk_suffix: str = ".chunk"
    merged_filename: str = "merged.mp4"

    # DASH output: <task path>/<dash_dirname>/<manifest_name>
    dash_dirname: str = "mpeg-dash"
    manifest_name: str = "output.mpd"
    ffmpeg_bin: str = "ffmpeg"

    # Queue loop sleep when no message arrived
    poll_interval_sec: float = 5.0

    log_level: str = "INFO"

    @field_validator("chunk_suffix")
    @classmethod
    def ensure_leading_dot(cls, v: str) -> str:
        if v and not v.startswith("."):
            return "." + v
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()


def get_settings() -> AssemblerSettings:
    """Return validated settings from current environment."""
    return AssemblerSettings()
