import os

import pytest

from media_scanner import main as entrypoint

ENV_KEYS = ["PORT", "SCAN_PATH", "HOST", "MAX_DEPTH", "IGNORED_DIRS", "INDEX_HTML", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def served(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_missing_port_is_fatal(tmp_path, served):
    code = entrypoint.main(["--scan-path", str(tmp_path), "--env-file", str(tmp_path / "none.env")])

    assert code == 1
    assert served == []


def test_invalid_port_is_fatal(tmp_path, served, monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    code = entrypoint.main(["--env-file", str(tmp_path / "none.env")])

    assert code == 1
    assert served == []


def test_flags_override_environment_and_start_server(tmp_path, served, monkeypatch):
    monkeypatch.setenv("PORT", "3000")
    code = entrypoint.main([
        "--port", "4321",
        "--scan-path", str(tmp_path),
        "--host", "0.0.0.0",
        "--env-file", str(tmp_path / "none.env"),
    ])

    assert code == 0
    app, kwargs = served[0]
    assert kwargs["port"] == 4321
    assert kwargs["host"] == "0.0.0.0"
    assert app.state.settings.scan_path == tmp_path.resolve()


def test_env_file_supplies_configuration(tmp_path, served, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(f"PORT=5555\nSCAN_PATH={tmp_path}\nMAX_DEPTH=1\n")

    try:
        code = entrypoint.main(["--env-file", str(env_file)])
    finally:
        # load_dotenv writes straight into os.environ
        for key in ["PORT", "SCAN_PATH", "MAX_DEPTH"]:
            os.environ.pop(key, None)

    assert code == 0
    settings = served[0][0].state.settings
    assert settings.port == 5555
    assert settings.max_depth == 1


def test_missing_scan_path_still_starts(tmp_path, served):
    code = entrypoint.main(["--port", "8080", "--env-file", str(tmp_path / "none.env")])

    assert code == 0
    assert served[0][0].state.settings.scan_path is None
