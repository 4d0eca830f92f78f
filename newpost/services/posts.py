"""The new-post workflow used by the CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ..config import POST_SUFFIX, PostRequest, RunSettings
from ..editor import (
    EditorCommand,
    launch_editor,
    resolve_editor_command,
    split_editor_command,
)
from ..frontmatter import create_safe_file_name, render_front_matter
from ..locator import locate_content_directory
from ..utils.datetime_fmt import local_midnight
from ..writer import write_post_file

logger = logging.getLogger(__name__)

LaunchFunc = Callable[[EditorCommand, Path], object]


def post_path(content_dir: Path, title: str) -> Path:
    return content_dir / f"{create_safe_file_name(title)}{POST_SUFFIX}"


def create_post(
    request: PostRequest,
    settings: RunSettings,
    *,
    launch: LaunchFunc | None = None,
) -> Path:
    """Write a new post under the content directory and open it in the editor.

    The first failure aborts the run. The file is written before the editor
    is resolved, so it can exist even when the run fails.
    """

    launch_fn = launch or launch_editor

    content_dir = locate_content_directory(settings.cwd)
    target = post_path(content_dir, request.title)

    document = render_front_matter(
        request.title, local_midnight(settings.now), request.tags
    )
    write_post_file(target, document)

    command = split_editor_command(
        resolve_editor_command(request.editor_override, settings.environ)
    )
    launch_fn(command, target)
    logger.debug("Finished editing %s", target)
    return target
