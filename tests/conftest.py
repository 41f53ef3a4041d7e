import sys
import pytest
from starlette.testclient import TestClient


def _clear_modules():
    # Settings and the engine are module-level; force a fresh import per test
    for name in list(sys.modules):
        if name == "bots_api" or name.startswith("bots_api."):
            del sys.modules[name]


@pytest.fixture()
def app_client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'bots.db'}")
    monkeypatch.setenv("DATABASE_CONNECT_RETRIES", "1")
    monkeypatch.setenv("API_PREFIX", "/api")

    _clear_modules()
    from bots_api.main import app

    # Entering the client runs the lifespan (tables are created there)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def created_bot(app_client):
    r = app_client.post("/api/bots", json={"name": "Mouse - Testing", "price": 50})
    assert r.status_code == 201
    return r.json()["data"]


@pytest.fixture()
def database_module(tmp_path, monkeypatch):
    """A freshly imported database module bound to a temp SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'bots.db'}")
    monkeypatch.setenv("DATABASE_CONNECT_RETRIES", "2")
    monkeypatch.setenv("DATABASE_RETRY_DELAY", "0")

    _clear_modules()
    from bots_api.core import database

    return database
