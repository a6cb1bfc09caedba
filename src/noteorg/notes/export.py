"""Markdown export: one file per note, metadata in YAML frontmatter."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import frontmatter

from noteorg.errors import StorageError
from noteorg.notes.models import Note

logger = logging.getLogger(__name__)


def slugify(title: str) -> str:
    """Minimal slug: strip illegal chars, spaces to hyphens, keep unicode."""
    slug = re.sub(r'[<>:"/\\|?*\n\r\t]', "", title)
    slug = slug.strip().replace(" ", "-")
    return slug or "unnamed"


def render(note: Note) -> str:
    post = frontmatter.Post(
        f"# {note.title}\n\n{note.body}\n",
        title=note.title,
        time_added=note.time_added.isoformat(timespec="milliseconds"),
    )
    return frontmatter.dumps(post) + "\n"


def export_markdown(notes: Iterable[Note], directory: Path) -> list[Path]:
    """Write every note to ``directory`` and return the written paths."""
    written: list[Path] = []
    taken: set[str] = set()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        for note in notes:
            slug = slugify(note.title)
            name = slug
            counter = 2
            while name.lower() in taken:
                name = f"{slug}-{counter}"
                counter += 1
            taken.add(name.lower())

            path = directory / f"{name}.md"
            path.write_text(render(note), encoding="utf-8")
            written.append(path)
    except OSError as e:
        raise StorageError(f"cannot export notes to {directory}: {e}", directory) from e

    logger.info("Exported %d notes to %s", len(written), directory)
    return written
