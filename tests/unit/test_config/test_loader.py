"""
Unit tests for settings-file and environment-file loading.
"""

import logging
import os
import tomllib

import pytest

from autobuilder.config import (
    load_env_file,
    load_settings_file,
    load_toml_file,
    parse_env_file,
)
from autobuilder.validation import ValidationError


@pytest.mark.unit
class TestParseEnvFile:
    """Test cases for KEY=VALUE parsing."""

    def test_only_first_equals_is_significant(self):
        assert parse_env_file("FOO=bar=baz") == {"FOO": "bar=baz"}

    def test_line_without_equals_is_ignored(self):
        assert parse_env_file("just some text\nKEY=value") == {"KEY": "value"}

    def test_blank_lines_are_ignored(self):
        assert parse_env_file("\n\nA=1\n\n   \nB=2\n") == {"A": "1", "B": "2"}

    def test_whitespace_around_key_and_value_is_stripped(self):
        assert parse_env_file("  PORT =  8080  ") == {"PORT": "8080"}

    def test_empty_value_is_kept(self):
        assert parse_env_file("EMPTY=") == {"EMPTY": ""}

    def test_empty_key_is_ignored(self):
        assert parse_env_file("=orphan") == {}

    def test_windows_line_endings(self):
        assert parse_env_file("A=1\r\nB=2\r\n") == {"A": "1", "B": "2"}

    def test_later_definition_wins(self):
        assert parse_env_file("A=1\nA=2") == {"A": "2"}


@pytest.mark.unit
class TestLoadEnvFile:
    """Test cases for exporting an environment file."""

    def test_exports_into_given_mapping(self, temp_dir, caplog):
        caplog.set_level(logging.INFO)
        env_path = temp_dir / ".env"
        env_path.write_text("DB_URL=postgres://u:p@h/db?sslmode=disable\nignored line\n")
        environ = {"EXISTING": "1"}

        pairs = load_env_file(env_path, environ=environ)

        assert pairs == {"DB_URL": "postgres://u:p@h/db?sslmode=disable"}
        assert environ == {"EXISTING": "1", "DB_URL": "postgres://u:p@h/db?sslmode=disable"}
        assert "Exported 1 variables" in caplog.text

    def test_exports_into_process_environment_by_default(self, temp_dir, monkeypatch):
        monkeypatch.delenv("AUTOBUILDER_TEST_VAR", raising=False)
        env_path = temp_dir / ".env"
        env_path.write_text("AUTOBUILDER_TEST_VAR=on\n")

        try:
            load_env_file(env_path)
            assert os.environ["AUTOBUILDER_TEST_VAR"] == "on"
        finally:
            monkeypatch.delenv("AUTOBUILDER_TEST_VAR", raising=False)

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(OSError):
            load_env_file(temp_dir / "missing.env", environ={})


@pytest.mark.unit
class TestSettingsFile:
    """Test cases for TOML settings loading."""

    def test_load_toml_file(self, temp_dir):
        path = temp_dir / "autobuilder.toml"
        path.write_text('[autobuilder]\nname = "server"\n')

        assert load_toml_file(path) == {"autobuilder": {"name": "server"}}

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_toml_file(temp_dir / "missing.toml")

    def test_malformed_file_raises(self, temp_dir):
        path = temp_dir / "broken.toml"
        path.write_text("[autobuilder\nname = ")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml_file(path)

    def test_settings_table_is_returned(self, temp_dir):
        path = temp_dir / "autobuilder.toml"
        path.write_text('[autobuilder]\nbuild_only = true\n\n[other]\nx = 1\n')

        assert load_settings_file(path) == {"build_only": True}

    def test_file_without_table_yields_empty_settings(self, temp_dir):
        path = temp_dir / "autobuilder.toml"
        path.write_text("[other]\nx = 1\n")

        assert load_settings_file(path) == {}

    def test_non_table_settings_rejected(self, temp_dir):
        path = temp_dir / "autobuilder.toml"
        path.write_text('autobuilder = "yes"\n')

        with pytest.raises(ValidationError):
            load_settings_file(path)
