"""Entry point: python -m noteorg [menu|export [DIR]]

- No args / "menu": Interactive note menu
- "export":         Write every note as Markdown into DIR (or the configured dir)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from noteorg.config import NoteorgConfig, load_config
from noteorg.errors import ConfigError, StorageError

logger = logging.getLogger("noteorg")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _open_repository(config: NoteorgConfig):
    from noteorg.notes.repository import NoteRepository
    from noteorg.notes.storage import NoteStorage

    storage = NoteStorage(config.storage.notes_file, indent=config.storage.indent)
    return NoteRepository.open(storage)


def _run_menu(config: NoteorgConfig) -> int:
    """Interactive menu mode."""
    from noteorg.cli import NoteMenu

    repository = _open_repository(config)
    try:
        return NoteMenu(repository).run()
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 0


def _run_export(config: NoteorgConfig, target: str | None) -> int:
    """Markdown export mode."""
    from noteorg.notes.export import export_markdown

    directory = Path(target).expanduser() if target else config.export.directory
    repository = _open_repository(config)
    written = export_markdown(repository.list_all(), directory)
    print(f"Exported {len(written)} notes to {directory}")
    return 0


def _usage() -> None:
    print("Usage: python -m noteorg [menu|export [DIR]]")
    print("  menu    Interactive note menu (default)")
    print("  export  Write notes as Markdown files into DIR")


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "menu"

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    _setup_logging(config.log_level)

    try:
        if cmd == "menu":
            status = _run_menu(config)
        elif cmd == "export":
            status = _run_export(config, args[1] if len(args) > 1 else None)
        else:
            _usage()
            status = 1
    except StorageError as e:
        logger.debug("Fatal storage error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        status = 1

    sys.exit(status)


if __name__ == "__main__":
    main()
