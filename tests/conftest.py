# File: tests/conftest.py

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# 1. Add project root to path
sys.path.append(os.getcwd())

from media_scanner.api.app import create_app
from media_scanner.core.config.settings import Settings
from media_scanner.features.os_opener.domain.interfaces import IOSOpener, OpenerError


class FakeOpener(IOSOpener):
    """Records the paths it was asked to open instead of launching anything."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def open_file(self, path: Path) -> None:
        self.calls.append(("file", path))
        if self.fail:
            raise OpenerError("xdg-open exited with status 4")

    def reveal_folder(self, path: Path) -> None:
        self.calls.append(("folder", path))
        if self.fail:
            raise OpenerError("xdg-open exited with status 4")


@pytest.fixture
def media_root(tmp_path):
    """
    Creates a library with media, junk, hidden and ignored entries:

    media/
      holiday.JPG, song.mp3, notes.txt, .hidden.png
      node_modules/icon.png
      .cache/thumb.png
      trips/beach.mp4, trips/readme.md
      trips/2023/summer/sunset.webp
      trips/2023/summer/deeper/lost.png   (below the default depth cutoff)
    """
    root = tmp_path / "media"
    root.mkdir()

    (root / "holiday.JPG").write_bytes(b"\xff\xd8FAKE_JPEG")
    (root / "song.mp3").write_bytes(b"FAKE_AUDIO")
    (root / "notes.txt").write_text("not media")
    (root / ".hidden.png").write_bytes(b"hidden")

    (root / "node_modules").mkdir()
    (root / "node_modules" / "icon.png").write_bytes(b"dependency")
    (root / ".cache").mkdir()
    (root / ".cache" / "thumb.png").write_bytes(b"cache")

    trips = root / "trips"
    trips.mkdir()
    (trips / "beach.mp4").write_bytes(b"FAKE_VIDEO" * 10)
    (trips / "readme.md").write_text("not media either")

    summer = trips / "2023" / "summer"
    summer.mkdir(parents=True)
    (summer / "sunset.webp").write_bytes(b"FAKE_WEBP")

    deeper = summer / "deeper"
    deeper.mkdir()
    (deeper / "lost.png").write_bytes(b"too deep")

    return root.resolve()


@pytest.fixture
def settings(media_root):
    return Settings(port=8765, scan_path=media_root)


@pytest.fixture
def fake_opener():
    return FakeOpener()


@pytest.fixture
def client(settings, fake_opener):
    return TestClient(create_app(settings, fake_opener))


@pytest.fixture
def make_client():
    """Builds a client around ad-hoc settings, e.g. with SCAN_PATH unset."""
    def _make(failing_opener: bool = False, **settings_kwargs) -> TestClient:
        return TestClient(create_app(Settings(**settings_kwargs), FakeOpener(fail=failing_opener)))
    return _make


@pytest.fixture
def undecodable_jpeg(media_root):
    """A media file whose name is Latin-1 bytes, not valid UTF-8 (b"caf\\xe9.jpg")."""
    raw_path = os.path.join(os.fsencode(media_root / "trips"), b"caf\xe9.jpg")
    try:
        with open(raw_path, "wb") as f:
            f.write(b"FAKE_JPEG")
    except (OSError, ValueError):
        pytest.skip("filesystem only accepts UTF-8 names")
    return raw_path
