"""Click-based command-line interface for new-post."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import click

from . import __version__
from .config import PostRequest, RunSettings
from .editor import launch_editor
from .errors import NewPostError
from .services.posts import create_post

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class NewPostCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    # basicConfig is a no-op when the root logger already has handlers.
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("newpost").setLevel(level)


@click.command(name="new-post", context_settings=CONTEXT_SETTINGS)
@click.argument("title")
@click.argument("tags", nargs=-1)
@click.option(
    "-e",
    "--editor",
    "editor_opt",
    type=str,
    default=None,
    help="Command to run to open the newly created file.",
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Log each step to standard error."
)
@click.version_option(__version__, prog_name="new-post")
def new_post(
    title: str, tags: tuple[str, ...], editor_opt: str | None, verbose: bool
) -> None:
    """Create a dated post named TITLE and open it in an editor.

    The post goes into the current directory when it is named "content",
    otherwise into its "content" subdirectory.

    TAGS are written to the [taxonomies] table of the front matter.
    """

    configure_logging(verbose)

    try:
        request = PostRequest.build(title, tags, editor_opt)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="TITLE") from exc
    logger.debug("Parsed request: %r", request)

    try:
        settings = RunSettings.from_process()
        create_post(request, settings, launch=launch_editor)
    except NewPostError as exc:
        raise NewPostCliError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = new_post.main(args=args, prog_name="new-post", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


def run() -> None:
    raise SystemExit(main())
