"""Interactive numbered menu over a NoteRepository."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from noteorg.errors import NotFoundError, ValidationError

if TYPE_CHECKING:
    from noteorg.notes.models import Note
    from noteorg.notes.repository import NoteRepository

logger = logging.getLogger(__name__)

MENU = """
=== Note Organizer Menu ===
1. Add a note
2. List all notes
3. Read a note
4. Delete a note
5. Update a note
6. Exit"""

EXIT_CHOICE = "6"


class NoteMenu:
    """Reads one line per prompt from ``stdin``, writes to ``stdout``.

    StorageError is not handled here; it propagates to the caller.
    """

    def __init__(
        self,
        repository: NoteRepository,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.repository = repository
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._actions = {
            "1": self.add_note,
            "2": self.list_notes,
            "3": self.read_note,
            "4": self.delete_note,
            "5": self.update_note,
        }

    def run(self) -> int:
        """Loop until the exit choice or end of input. Returns the exit status."""
        while True:
            self._print(MENU)
            try:
                choice = self._ask("\nEnter your choice (1-6): ")
            except EOFError:
                self._print("\nGoodbye!")
                return 0

            if choice == EXIT_CHOICE:
                self._print("Goodbye!")
                return 0

            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid choice. Please enter a number between 1 and 6.")
                continue

            try:
                action()
            except EOFError:
                self._print("\nGoodbye!")
                return 0
            except (ValidationError, NotFoundError) as e:
                logger.debug("Menu action %s rejected: %s", choice, e)
                self._print(f"Error: {e}")

    # ── Actions ──────────────────────────────────────────────

    def add_note(self) -> None:
        title = self._ask_non_empty("Enter note title: ", "Title cannot be empty.")
        # Checked before prompting for the body; add() checks again.
        if self.repository.has_title(title):
            raise ValidationError(f'A note with the title "{title}" already exists.')
        body = self._ask_non_empty("Enter note body: ", "Note body cannot be empty.")
        self.repository.add(title, body)
        self._print("Note added successfully!")

    def list_notes(self) -> None:
        notes = self.repository.list_all()
        if not notes:
            self._print("No notes found.")
            return
        self._print("\nAll Notes:")
        for i, note in enumerate(notes, start=1):
            self._print(f"{i}. Title: {note.title}")
            self._print(f"   Body: {note.body}")
            self._print(f"   Added on: {_format_time(note)}\n")

    def read_note(self) -> None:
        query = self._ask_query("Enter part of the note title: ")
        if query is None:
            return
        note = self.repository.find_by_title(query)
        if note is None:
            raise NotFoundError(f'No note found containing "{query}".')
        self._print(f"\nTitle: {note.title}")
        self._print(f"Body: {note.body}")
        self._print(f"Added on: {_format_time(note)}\n")

    def delete_note(self) -> None:
        query = self._ask_query("Enter part of the note title to delete: ")
        if query is None:
            return
        note = self.repository.delete(query)
        self._print(f'Note titled "{note.title}" deleted successfully!')

    def update_note(self) -> None:
        query = self._ask_query("Enter part of the note title to update: ")
        if query is None:
            return
        if self.repository.find_by_title(query) is None:
            raise NotFoundError(f'No note found containing "{query}".')
        new_body = self._ask("Enter new note body: ")
        self.repository.update(query, new_body)
        self._print("Note updated successfully!")

    # ── I/O helpers ──────────────────────────────────────────

    def _print(self, text: str) -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _ask_non_empty(self, prompt: str, error: str) -> str:
        while True:
            value = self._ask(prompt)
            if value:
                return value
            self._print(error)

    def _ask_query(self, prompt: str) -> str | None:
        query = self._ask(prompt)
        if not query:
            self._print("Title input cannot be empty.")
            return None
        return query


def _format_time(note: Note) -> str:
    return note.time_added.isoformat(timespec="milliseconds")
