"""Error types shared by storage, repository and menu."""

from __future__ import annotations

from pathlib import Path


class NoteError(Exception):
    """Base class for all noteorg errors."""


class ValidationError(NoteError):
    """Empty field or duplicate title. The operation is aborted."""


class NotFoundError(NoteError):
    """No note matches the given title query."""


class StorageError(NoteError):
    """The notes document cannot be read, parsed or written.

    Not recoverable: callers let it propagate to the entry point.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(NoteError):
    """noteorg.toml or a NOTEORG_* variable cannot be parsed."""
