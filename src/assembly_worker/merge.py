"""
Merge chunk files into one contiguous file.

Lists <input_dir>/*<suffix>, orders them with chunk_order and streams each
into the output byte for byte (no re-encoding). Partial output is left on
disk when a copy fails; cleanup belongs to the caller.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .chunk_order import sort_chunks
from .errors import MergeError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SUFFIX = ".chunk"


def list_chunks(input_dir: str | Path, suffix: str = DEFAULT_CHUNK_SUFFIX) -> list[Path]:
    """Return chunk files in input_dir in merge order. A missing directory has no chunks."""
    input_dir = Path(input_dir)
    try:
        candidates = [p for p in input_dir.iterdir() if p.name.endswith(suffix) and p.is_file()]
    except FileNotFoundError:
        return []
    except (OSError, ValueError) as e:
        raise MergeError(f"Error reading chunks ({e})", input_dir) from e
    return sort_chunks(candidates)


def merge_chunks(
    input_dir: str | Path,
    output_file: str | Path,
    *,
    suffix: str = DEFAULT_CHUNK_SUFFIX,
) -> list[Path]:
    """
    Concatenate the chunks of input_dir into output_file and return them in merge order.

    No chunks yields an empty output file. Raises MergeError with the offending
    path if the output cannot be created or a chunk cannot be read or copied.
    """
    output_file = Path(output_file)
    chunks = list_chunks(input_dir, suffix)
    logger.debug("merge: %s chunks in %s -> %s", len(chunks), input_dir, output_file.name)

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise MergeError(f"Error creating output directory ({e})", output_file.parent) from e

    try:
        out = open(output_file, "wb")
    except (OSError, ValueError) as e:
        raise MergeError(f"Error creating output file ({e})", output_file) from e

    with out:
        for chunk in chunks:
            try:
                src = open(chunk, "rb")
            except (OSError, ValueError) as e:
                raise MergeError(f"Error opening chunk ({e})", chunk) from e
            with src:
                try:
                    shutil.copyfileobj(src, out)
                except OSError as e:
                    raise MergeError(f"Error copying chunk to output ({e})", chunk) from e
    return chunks
