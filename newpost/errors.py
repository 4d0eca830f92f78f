"""Error types shared across the new-post workflow."""

from __future__ import annotations


class NewPostError(RuntimeError):
    """Base error for failures surfaced to the user."""


class PostIOError(NewPostError):
    """Raised when a filesystem or process operation fails."""

    @classmethod
    def from_error(cls, message: str, error: BaseException) -> "PostIOError":
        return cls(f"{message}: {error}")


class NotFoundError(NewPostError):
    """Raised when a required resource (directory, editor) cannot be located."""
