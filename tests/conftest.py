import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from playground.api.main import app

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session", autouse=True)
def _force_test_env():
    # Make runtime behave deterministically in tests
    os.environ.setdefault("PLAYGROUND_ENV", "dev")


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def repo_actors_dir(monkeypatch):
    d = REPO_ROOT / "templates" / "actors"
    monkeypatch.setenv("PLAYGROUND_ACTORS_DIR", str(d))
    return d


@pytest.fixture()
def actors_dir(tmp_path: Path, monkeypatch):
    """
    Empty actors directory wired into the API via PLAYGROUND_ACTORS_DIR.
    """
    d = tmp_path / "actors"
    d.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("PLAYGROUND_ACTORS_DIR", str(d))
    return d
