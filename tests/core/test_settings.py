import os
from pathlib import Path

import pytest

from media_scanner.core.config.settings import (
    DEFAULT_INDEX_HTML,
    ConfigurationError,
    Settings,
    load_env_file,
)


def test_defaults_from_empty_environment():
    settings = Settings.from_env({})

    assert settings.port is None
    assert settings.scan_path is None
    assert settings.host == "127.0.0.1"
    assert settings.max_depth == 3
    assert settings.ignored_dirs == frozenset({"node_modules"})
    assert settings.index_html == DEFAULT_INDEX_HTML
    assert settings.missing() == ["PORT", "SCAN_PATH"]


def test_full_environment(tmp_path):
    settings = Settings.from_env({
        "PORT": " 3000 ",
        "SCAN_PATH": str(tmp_path),
        "HOST": "0.0.0.0",
        "MAX_DEPTH": "5",
        "IGNORED_DIRS": "node_modules, __pycache__ ,,venv",
        "INDEX_HTML": str(tmp_path / "page.html"),
        "LOG_LEVEL": "debug",
    })

    assert settings.port == 3000
    assert settings.scan_path == tmp_path.resolve()
    assert settings.host == "0.0.0.0"
    assert settings.max_depth == 5
    assert settings.ignored_dirs == frozenset({"node_modules", "__pycache__", "venv"})
    assert settings.index_html == tmp_path / "page.html"
    assert settings.log_level == "DEBUG"
    assert settings.missing() == []


def test_relative_scan_path_becomes_absolute(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings.from_env({"SCAN_PATH": "."})

    assert settings.scan_path.is_absolute()
    assert settings.scan_path == tmp_path.resolve()


def test_blank_values_count_as_unset():
    settings = Settings.from_env({"PORT": "", "SCAN_PATH": "  "})
    assert settings.missing() == ["PORT", "SCAN_PATH"]


@pytest.mark.parametrize("env", [
    {"PORT": "abc"},
    {"PORT": "0"},
    {"PORT": "70000"},
    {"MAX_DEPTH": "-1"},
    {"MAX_DEPTH": "three"},
    {"LOG_LEVEL": "chatty"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ConfigurationError):
        Settings.from_env(env)


def test_settings_are_immutable():
    settings = Settings(port=3000)
    with pytest.raises(Exception):
        settings.port = 4000


def test_env_file_does_not_override_environment(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# media scanner\n"
        "MEDIA_SCANNER_TEST_PORT=1111\n"
        "MEDIA_SCANNER_TEST_ROOT=/from/file\n"
    )
    monkeypatch.setenv("MEDIA_SCANNER_TEST_PORT", "2222")
    monkeypatch.setenv("MEDIA_SCANNER_TEST_ROOT", "placeholder")
    monkeypatch.delenv("MEDIA_SCANNER_TEST_ROOT")

    assert load_env_file(env_file) is True

    assert os.environ["MEDIA_SCANNER_TEST_PORT"] == "2222"
    assert os.environ["MEDIA_SCANNER_TEST_ROOT"] == "/from/file"


def test_missing_env_file_is_not_an_error(tmp_path):
    assert load_env_file(tmp_path / "absent.env") is False
