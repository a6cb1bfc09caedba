"""In-memory note repository.

Holds the note list for the lifetime of the process and mirrors it to disk
through :class:`NoteStorage` after every mutation. Title lookups are a
linear, case-insensitive scan: exact title first, then substring.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from noteorg.errors import NotFoundError, StorageError, ValidationError
from noteorg.notes.models import Note, now
from noteorg.notes.storage import NoteStorage

logger = logging.getLogger(__name__)


class NoteRepository:
    """Owns the current note collection and its mutations."""

    def __init__(self, storage: NoteStorage, notes: list[Note] | None = None) -> None:
        self.storage = storage
        self._notes: list[Note] = list(notes) if notes else []

    @classmethod
    def open(cls, storage: NoteStorage) -> NoteRepository:
        """Build a repository from whatever ``storage`` currently holds."""
        return cls(storage, storage.load())

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.list_all())

    # ── Queries ──────────────────────────────────────────────

    def list_all(self) -> tuple[Note, ...]:
        """All notes in insertion order."""
        return tuple(self._notes)

    def has_title(self, title: str) -> bool:
        """True if a note already uses ``title``, ignoring case."""
        t = title.strip().lower()
        return any(n.title.lower() == t for n in self._notes)

    def find_by_title(self, query: str) -> Note | None:
        """Exact (case-insensitive) title match first, else first substring match."""
        q = query.strip().lower()
        if not q:
            return None

        for note in self._notes:
            if note.title.lower() == q:
                return note

        for note in self._notes:
            if q in note.title.lower():
                return note
        return None

    def _index_of(self, query: str) -> int | None:
        """Index of the first note whose title equals or contains ``query``."""
        q = query.strip().lower()
        if not q:
            return None
        for i, note in enumerate(self._notes):
            title = note.title.lower()
            if title == q or q in title:
                return i
        return None

    # ── Mutations ────────────────────────────────────────────

    def add(self, title: str, body: str) -> Note:
        """Create a note. Raises ValidationError on empty fields or duplicate title."""
        title = title.strip()
        body = body.strip()
        if not title:
            raise ValidationError("Title cannot be empty.")
        if not body:
            raise ValidationError("Note body cannot be empty.")
        if self.has_title(title):
            raise ValidationError(f'A note with the title "{title}" already exists.')

        note = Note(title=title, body=body, time_added=now())
        notes = [*self._notes, note]
        self.storage.save(notes)
        self._notes = notes
        logger.info("Created note: %s", title)
        return note

    def update(self, query: str, new_body: str) -> Note:
        """Replace the body of the note matching ``query``."""
        note = self.find_by_title(query)
        if note is None:
            raise NotFoundError(f'No note found containing "{query.strip()}".')
        new_body = new_body.strip()
        if not new_body:
            raise ValidationError("Note body cannot be empty.")

        old_body, note.body = note.body, new_body
        try:
            self.storage.save(self._notes)
        except StorageError:
            note.body = old_body
            raise
        logger.info("Updated note: %s", note.title)
        return note

    def delete(self, query: str) -> Note:
        """Remove and return the first note whose title matches ``query``."""
        index = self._index_of(query)
        if index is None:
            raise NotFoundError(f'No note found containing "{query.strip()}".')

        notes = list(self._notes)
        note = notes.pop(index)
        self.storage.save(notes)
        self._notes = notes
        logger.info("Deleted note: %s", note.title)
        return note
