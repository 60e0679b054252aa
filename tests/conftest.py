import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from playerkit.core.files import FileStore
from playerkit.core.i18n import Localizer
from playerkit.core.player import FileRecord, PlayerContext, wrap_in_tag
from playerkit.core.preferences import PreferenceStore
from playerkit.core.providers import get_registry
from playerkit.core.services import reset_services

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

FILES = [
    {"id": 7, "filename": "b.ogg", "created": "2024-01-01T00:00:00Z"},
    {"id": 8, "filename": "track.mp3", "created": "2024-02-01T00:00:00Z"},
    {"id": 9, "filename": "later.flac", "created": "2099-01-01T00:00:00Z"},
]


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch):
    # Deterministic services per test: empty prefs, known file manifest.
    files = tmp_path / "files.json"
    files.write_text(json.dumps(FILES), encoding="utf-8")
    monkeypatch.setenv("PLAYERKIT_FILES_FILE", str(files))
    monkeypatch.setenv("PLAYERKIT_PREFS_FILE", str(tmp_path / "no_prefs.yaml"))
    monkeypatch.setenv("PLAYERKIT_STRINGS_FILE", str(tmp_path / "no_strings.yaml"))
    monkeypatch.setenv("PLAYERKIT_SITE_URL", "https://example.com")
    reset_services()
    yield
    reset_services()


@pytest.fixture()
def file_store():
    return FileStore(
        [FileRecord.model_validate(f) for f in FILES],
        base_url="https://example.com/",
    )


@pytest.fixture()
def make_context(file_store):
    """Build a PlayerContext around an in-memory preference mapping."""

    def _make(prefs=None):
        store = PreferenceStore(get_registry().preference_defaults(), prefs or {})
        return PlayerContext(
            preference_lookup=store.lookup,
            file_lookup=file_store.find,
            url_from_file=file_store.download_url,
            localize=Localizer(),
            wrap_in_tag=wrap_in_tag,
            now=lambda: NOW,
        )

    return _make


@pytest.fixture()
def audio():
    return get_registry().get("audio")


@pytest.fixture()
def client():
    from playerkit.api.main import app

    return TestClient(app)
