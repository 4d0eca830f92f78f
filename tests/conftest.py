from __future__ import annotations

import tomllib
from typing import Any, Callable

import pytest
from newpost.frontmatter import FRONTMATTER_DELIM


def _parse_front_matter(raw: str) -> dict[str, Any]:
    lines = raw.splitlines()
    assert lines and lines[0] == FRONTMATTER_DELIM, "missing opening fence"
    closing_index = lines.index(FRONTMATTER_DELIM, 1)
    return tomllib.loads("\n".join(lines[1:closing_index]))


@pytest.fixture
def read_front_matter() -> Callable[[str], dict[str, Any]]:
    """Parse the ``+++`` fenced TOML block of a rendered post."""

    return _parse_front_matter
