"""JSON document storage for the full note list.

The whole collection is read and written at once. Writes go to a sibling
``.tmp`` file which is then renamed over the document, so a load never sees
a half-written file.
"""

from __future__ import annotations

import contextlib
import json
import logging
from collections.abc import Iterable
from pathlib import Path

from noteorg.errors import StorageError
from noteorg.notes.models import Note

logger = logging.getLogger(__name__)


class NoteStorage:
    """Read/write access to the notes document."""

    def __init__(self, path: Path, indent: int = 2) -> None:
        self.path = path
        self.indent = indent

    def load(self) -> list[Note]:
        """Read every note from disk, creating an empty document if absent."""
        if not self.path.exists():
            logger.info("Notes file %s not found, initializing empty document", self.path)
            self.save([])
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"cannot read notes file {self.path}: {e}", self.path) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"notes file {self.path} is not valid JSON: {e}", self.path) from e

        if not isinstance(data, list):
            raise StorageError(
                f"notes file {self.path} must contain a JSON array, got {type(data).__name__}",
                self.path,
            )

        notes: list[Note] = []
        seen: set[str] = set()
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise StorageError(f"entry {i} in {self.path} is not an object", self.path)
            try:
                note = Note.from_dict(item)
            except ValueError as e:
                raise StorageError(f"entry {i} in {self.path}: {e}", self.path) from e
            key = note.title.lower()
            if key in seen:
                raise StorageError(
                    f"entry {i} in {self.path}: duplicate title {note.title!r}", self.path
                )
            seen.add(key)
            notes.append(note)

        logger.debug("Loaded %d notes from %s", len(notes), self.path)
        return notes

    def save(self, notes: Iterable[Note]) -> None:
        """Overwrite the document with ``notes``."""
        payload = json.dumps(
            [n.to_dict() for n in notes], ensure_ascii=False, indent=self.indent
        )
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"cannot write notes file {self.path}: {e}", self.path) from e
        logger.debug("Saved notes to %s (%d bytes)", self.path, len(payload))
