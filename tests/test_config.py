"""Tests for configuration loading."""

import pytest
from pathlib import Path

from noteorg.config import load_config
from noteorg.errors import ConfigError

_ENV_KEYS = ["NOTEORG_NOTES_FILE", "NOTEORG_INDENT", "NOTEORG_EXPORT_DIR", "NOTEORG_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.storage.notes_file.name == "notes.json"
        assert config.storage.notes_file.parent.name == ".noteorg"
        assert config.storage.indent == 2
        assert config.export.directory.name == "export"
        assert config.log_level == "WARNING"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("NOTEORG_NOTES_FILE", str(tmp_path / "mine.json"))
        monkeypatch.setenv("NOTEORG_INDENT", "4")
        monkeypatch.setenv("NOTEORG_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.storage.notes_file == tmp_path / "mine.json"
        assert config.storage.indent == 4
        assert config.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "noteorg.toml"
        toml_path.write_text("""
log_level = "INFO"

[storage]
notes_file = "/var/tmp/notes.json"
indent = 0

[export]
directory = "/var/tmp/export"
""")
        config = load_config(toml_path)
        assert config.storage.notes_file == Path("/var/tmp/notes.json")
        assert config.storage.indent == 0
        assert config.export.directory == Path("/var/tmp/export")
        assert config.log_level == "INFO"

    def test_toml_discovered_in_cwd(self, tmp_path: Path):
        (tmp_path / "noteorg.toml").write_text('log_level = "ERROR"\n')
        config = load_config()
        assert config.log_level == "ERROR"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("NOTEORG_EXPORT_DIR", str(tmp_path / "from-env"))

        toml_path = tmp_path / "noteorg.toml"
        toml_path.write_text("""
[export]
directory = "/from/toml"
""")
        config = load_config(toml_path)
        assert config.export.directory == tmp_path / "from-env"  # env wins

    def test_tilde_expanded(self, monkeypatch):
        monkeypatch.setenv("NOTEORG_NOTES_FILE", "~/somewhere/notes.json")
        config = load_config()
        assert config.storage.notes_file == Path.home() / "somewhere" / "notes.json"


class TestConfigErrors:
    def test_malformed_toml(self, tmp_path: Path):
        toml_path = tmp_path / "noteorg.toml"
        toml_path.write_text("[storage\nindent = 2\n")
        with pytest.raises(ConfigError, match="invalid config file"):
            load_config(toml_path)

    def test_non_integer_indent(self, monkeypatch):
        monkeypatch.setenv("NOTEORG_INDENT", "wide")
        with pytest.raises(ConfigError, match="NOTEORG_INDENT"):
            load_config()
