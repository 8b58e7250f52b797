"""
ffmpeg boundary: convert the merged file to MPEG-DASH.

The process call goes through a CommandRunner so tests can inject a fake
instead of spawning ffmpeg. The call blocks until ffmpeg exits; there is no
internal timeout.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from assembly_shared import CommandResult, CommandRunner

from .errors import TranscodeError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """CommandRunner backed by subprocess.run with stderr merged into stdout."""

    def run(self, args: Sequence[str]) -> CommandResult:
        proc = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
        return CommandResult(returncode=proc.returncode, output=proc.stdout or b"")


def build_dash_command(ffmpeg_bin: str, input_path: Path, manifest_path: Path) -> list[str]:
    """ffmpeg argv for segmented DASH output with the manifest at manifest_path."""
    return [
        ffmpeg_bin,
        "-y",
        "-i",
        str(input_path),
        "-f",
        "dash",
        str(manifest_path),
    ]


class Transcoder:
    """Runs ffmpeg on a merged file and removes the file once the DASH output exists."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        *,
        ffmpeg_bin: str = "ffmpeg",
        manifest_name: str = "output.mpd",
    ) -> None:
        self._runner = runner or SubprocessRunner()
        self._ffmpeg_bin = ffmpeg_bin
        self._manifest_name = manifest_name

    def transcode(self, merged_file: str | Path, output_dir: str | Path) -> Path:
        """
        Convert merged_file to DASH in output_dir and return the manifest path.

        Raises TranscodeError if output_dir cannot be created, ffmpeg cannot be
        started, or ffmpeg exits non-zero. The merged file is kept on failure.
        """
        merged_file = Path(merged_file)
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise TranscodeError(f"Error creating output directory {output_dir}: {e}") from e

        manifest = output_dir / self._manifest_name
        args = build_dash_command(self._ffmpeg_bin, merged_file, manifest)
        logger.debug("transcode: running %s", " ".join(args))
        try:
            result = self._runner.run(args)
        except (OSError, ValueError) as e:
            raise TranscodeError(f"failed to start {self._ffmpeg_bin}: {e}") from e
        if not result.ok:
            raise TranscodeError(
                "failed to convert to MPEG-DASH",
                returncode=result.returncode,
                output=result.output_text(),
            )

        try:
            merged_file.unlink()
        except OSError as e:
            logger.warning("transcode: failed to remove merged file %s: %s", merged_file, e)
        return manifest
