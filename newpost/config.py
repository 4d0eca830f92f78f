"""Run inputs for new-post: the parsed request and the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Mapping

from .errors import PostIOError

CONTENT_DIR_NAME = "content"
POST_SUFFIX = ".md"
EDITOR_ENV_VARS = ("VISUAL", "EDITOR")


@dataclass(frozen=True, slots=True)
class PostRequest:
    """What the user asked for on the command line."""

    title: str
    tags: tuple[str, ...] = ()
    editor_override: str | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("A post title is required.")

    @classmethod
    def build(
        cls, title: str, tags: Iterable[str] = (), editor: str | None = None
    ) -> "PostRequest":
        return cls(title=title, tags=tuple(tags), editor_override=editor)


@dataclass(frozen=True, slots=True)
class RunSettings:
    """Process-wide inputs, captured once and handed to each component.

    Parameters
    ----------
    cwd:
        Directory the content search starts from.
    environ:
        Environment used to resolve the editor (``VISUAL`` then ``EDITOR``).
    now:
        Wall-clock time at process start; the post date is derived from it.
    """

    cwd: Path
    environ: Mapping[str, str] = field(default_factory=dict)
    now: datetime = field(default_factory=lambda: datetime.now().astimezone())

    @classmethod
    def from_process(cls) -> "RunSettings":
        """Read the working directory, environment and clock of this process."""

        try:
            cwd = Path.cwd()
        except OSError as exc:
            raise PostIOError.from_error(
                "Failed to get current working directory", exc
            ) from exc
        return cls(cwd=cwd, environ=dict(os.environ), now=datetime.now().astimezone())
