"""Persist rendered posts to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import PostIOError

logger = logging.getLogger(__name__)


def write_post_file(path: Path, text: str) -> None:
    """Create or overwrite ``path`` with exactly ``text``. The write is not atomic."""

    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise PostIOError.from_error("Failed to create file", exc) from exc
    logger.debug("Wrote %d characters to %s", len(text), path)
