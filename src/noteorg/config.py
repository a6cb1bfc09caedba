"""Configuration loading from environment variables and noteorg.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from noteorg.errors import ConfigError

_DEFAULT_HOME = Path.home() / ".noteorg"
_CONFIG_FILENAME = "noteorg.toml"


@dataclass
class StorageConfig:
    """Where and how the notes document is written."""

    notes_file: Path = _DEFAULT_HOME / "notes.json"
    indent: int = 2


@dataclass
class ExportConfig:
    """Markdown export configuration."""

    directory: Path = _DEFAULT_HOME / "export"


@dataclass
class NoteorgConfig:
    """Top-level noteorg configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    log_level: str = "WARNING"


def _path(value: str | Path) -> Path:
    return Path(value).expanduser()


def _read_toml(path: Path) -> dict:
    try:
        return tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e


def _int(name: str, default: int | str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def load_config(config_path: Path | None = None) -> NoteorgConfig:
    """Load configuration from environment variables and optional noteorg.toml.

    Priority: environment variables > noteorg.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = _read_toml(config_path)
    else:
        # Search current dir and ~/.noteorg/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _DEFAULT_HOME / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = _read_toml(candidate)
                break

    storage_data = file_data.get("storage", {})
    export_data = file_data.get("export", {})

    return NoteorgConfig(
        storage=StorageConfig(
            notes_file=_path(
                os.getenv(
                    "NOTEORG_NOTES_FILE",
                    storage_data.get("notes_file", str(_DEFAULT_HOME / "notes.json")),
                )
            ),
            indent=_int("NOTEORG_INDENT", storage_data.get("indent", 2)),
        ),
        export=ExportConfig(
            directory=_path(
                os.getenv(
                    "NOTEORG_EXPORT_DIR",
                    export_data.get("directory", str(_DEFAULT_HOME / "export")),
                )
            ),
        ),
        log_level=os.getenv("NOTEORG_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
