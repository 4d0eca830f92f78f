"""Find the directory new posts are written into."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import CONTENT_DIR_NAME
from .errors import NotFoundError, PostIOError

logger = logging.getLogger(__name__)


def locate_content_directory(cwd: Path, name: str = CONTENT_DIR_NAME) -> Path:
    """Return ``cwd`` when it is the content directory, else its ``content`` child.

    Only the working directory and its immediate children are considered;
    parents are never searched. Children are visited in the order the OS
    lists them, and a symlink named ``content`` is not a match even when it
    points at a directory.
    """

    if cwd.name == name:
        logger.debug("Working directory %s is the content directory", cwd)
        return cwd

    try:
        with os.scandir(cwd) as entries:
            children = list(entries)
    except OSError as exc:
        raise PostIOError.from_error(
            "Failed to get children of current working directory", exc
        ) from exc

    for entry in children:
        if entry.name != name:
            continue
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            # Unreadable entries are not candidates.
            continue
        if is_dir:
            found = Path(entry.path)
            logger.debug("Found content directory %s", found)
            return found

    raise NotFoundError(f"Failed to find a directory named '{name}'")
