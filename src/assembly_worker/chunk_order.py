"""
Chunk ordering: numeric key from the first digit run in a chunk filename.

Names without digits get MALFORMED_ORDER_KEY and sort before every numbered
chunk instead of failing the merge. Ties are broken by filename so the order
is total and deterministic.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

MALFORMED_ORDER_KEY = -1

_DIGITS_RE = re.compile(r"[0-9]+")


def order_key(filename: str | Path) -> int:
    """Return the int value of the first digit run in the basename, or MALFORMED_ORDER_KEY."""
    match = _DIGITS_RE.search(Path(filename).name)
    if match is None:
        return MALFORMED_ORDER_KEY
    return int(match.group())


def sort_key(filename: str | Path) -> tuple[int, str]:
    """Total ordering key: (order_key, basename)."""
    return order_key(filename), Path(filename).name


def sort_chunks(paths: Iterable[str | Path]) -> list[Path]:
    """Return paths sorted by sort_key; log a warning for each name without a digit run."""
    result = sorted((Path(p) for p in paths), key=sort_key)
    for p in result:
        if order_key(p) != MALFORMED_ORDER_KEY:
            break
        logger.warning("chunk_order: %s has no numeric index, ordering it first", p.name)
    return result
