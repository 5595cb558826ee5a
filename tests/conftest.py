"""Shared fixtures: every test gets its own data file and a fresh app client."""

import json

import pytest
from fastapi.testclient import TestClient

from main import app
from services.document_store import JsonDocumentStore
from utils.rate_limit import limiter


SEED = {
    "countries": [
        {
            "id": "us",
            "name": "United States",
            "capital": "Washington, D.C.",
            "region": "Americas",
            "population": 331900000,
            "notes": [],
        },
        {
            "id": "fr",
            "name": "France",
            "capital": "Paris",
            "region": "Europe",
            "population": 67970000,
            "currency": "EUR",
            "notes": [
                {
                    "id": "n1",
                    "title": "Bakeries",
                    "content": "Go early.",
                    "author": "Ana",
                    "createdAt": "2024-01-01T10:00:00.000Z",
                }
            ],
        },
    ]
}


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


@pytest.fixture
def store(db_path):
    return JsonDocumentStore(db_path)


@pytest.fixture
def client(store):
    limiter.reset()
    app.state.store = store
    with TestClient(app) as c:
        yield c
    app.state.store = None


@pytest.fixture
def read_db(db_path):
    """Parsed contents of the data file as currently on disk."""
    def _read():
        return json.loads(db_path.read_text(encoding="utf-8"))
    return _read
