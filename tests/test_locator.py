from __future__ import annotations

from pathlib import Path

import pytest
from newpost import locator as locator_module
from newpost.errors import NotFoundError, PostIOError
from newpost.locator import locate_content_directory


def test_returns_cwd_when_named_content(tmp_path: Path, monkeypatch) -> None:
    cwd = tmp_path / "content"
    cwd.mkdir()

    def fail_scandir(path):  # pragma: no cover - must not be called
        raise AssertionError("children must not be inspected")

    monkeypatch.setattr(locator_module.os, "scandir", fail_scandir)

    assert locate_content_directory(cwd) == cwd


def test_returns_content_child(tmp_path: Path) -> None:
    (tmp_path / "content").mkdir()
    (tmp_path / "static").mkdir()
    (tmp_path / "config.toml").write_text("", encoding="utf-8")

    assert locate_content_directory(tmp_path) == tmp_path / "content"


def test_ignores_file_named_content(tmp_path: Path) -> None:
    (tmp_path / "content").write_text("not a dir", encoding="utf-8")

    with pytest.raises(NotFoundError):
        locate_content_directory(tmp_path)


def test_missing_content_directory(tmp_path: Path) -> None:
    (tmp_path / "posts").mkdir()

    with pytest.raises(NotFoundError, match="'content'"):
        locate_content_directory(tmp_path)


def test_does_not_recurse_into_grandchildren(tmp_path: Path) -> None:
    (tmp_path / "site" / "content").mkdir(parents=True)

    with pytest.raises(NotFoundError):
        locate_content_directory(tmp_path)


def test_does_not_search_parents(tmp_path: Path) -> None:
    (tmp_path / "content").mkdir()
    nested = tmp_path / "elsewhere"
    nested.mkdir()

    with pytest.raises(NotFoundError):
        locate_content_directory(nested)


def test_unreadable_directory_is_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "gone"

    with pytest.raises(PostIOError, match="Failed to get children"):
        locate_content_directory(missing)


def test_symlink_named_content_is_not_followed(tmp_path: Path) -> None:
    real = tmp_path / "real-content"
    real.mkdir()
    site = tmp_path / "site"
    site.mkdir()
    (site / "content").symlink_to(real, target_is_directory=True)

    with pytest.raises(NotFoundError):
        locate_content_directory(site)
