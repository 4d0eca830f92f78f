"""Front matter rendering and file naming for new posts."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from .utils.datetime_fmt import to_rfc3339

FRONTMATTER_DELIM = "+++"
UNSAFE_FILENAME_CHARS = ("'", '"', "(", ")")


def create_safe_file_name(title: str) -> str:
    """Strip quote and parenthesis characters from ``title``.

    Nothing else is touched: whitespace, length and collisions with existing
    files are left alone.
    """

    return title.translate({ord(char): None for char in UNSAFE_FILENAME_CHARS})


def render_tags(tags: Iterable[str]) -> str:
    return ", ".join(f'"{tag}"' for tag in tags)


def render_front_matter(title: str, date: datetime, tags: Iterable[str]) -> str:
    # Values are inserted verbatim; a double quote in the title or a tag
    # yields invalid TOML.
    return (
        f"{FRONTMATTER_DELIM}\n"
        f'title = "{title}"\n'
        f"date = {to_rfc3339(date)}\n"
        "[taxonomies]\n"
        f"tags = [{render_tags(tags)}]\n"
        f"{FRONTMATTER_DELIM}\n"
    )
