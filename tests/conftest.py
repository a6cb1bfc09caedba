"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from noteorg.notes.repository import NoteRepository
from noteorg.notes.storage import NoteStorage


@pytest.fixture
def notes_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "notes.json"


@pytest.fixture
def storage(notes_file: Path) -> NoteStorage:
    return NoteStorage(notes_file)


@pytest.fixture
def repo(storage: NoteStorage) -> NoteRepository:
    return NoteRepository.open(storage)
