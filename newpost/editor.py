"""Resolve the user's editor and open a file in it."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .config import EDITOR_ENV_VARS
from .errors import NotFoundError, PostIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EditorCommand:
    """Program plus leading arguments; the file path is appended last."""

    program: str
    extra_args: tuple[str, ...] = ()

    def argv(self, path: Path) -> list[str]:
        return [self.program, *self.extra_args, str(path)]


def resolve_editor_command(
    override: str | None, environ: Mapping[str, str]
) -> str:
    """Return the editor command string: ``override``, then ``VISUAL``, then ``EDITOR``."""

    if override is not None:
        return override
    for name in EDITOR_ENV_VARS:
        value = environ.get(name)
        if value is not None:
            return value
    raise NotFoundError("Unable to find a valid path to an editor")


def split_editor_command(command: str) -> EditorCommand:
    """Split on single spaces. Quoting is not understood, so paths with spaces break."""

    program, *extra_args = command.split(" ")
    return EditorCommand(program=program, extra_args=tuple(extra_args))


def launch_editor(command: EditorCommand, path: Path) -> int:
    """Run the editor on ``path`` with inherited stdio and wait for it to exit.

    Returns the editor's exit status; callers do not treat non-zero as failure.
    """

    args = command.argv(path)
    logger.debug("Launching editor: %s", args)
    try:
        process = subprocess.run(args, check=False)
    except OSError as exc:
        raise PostIOError.from_error("Failed to start editor process", exc) from exc

    if process.returncode != 0:
        logger.debug("Editor exited with status %d", process.returncode)
    return process.returncode
