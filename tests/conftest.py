"""Shared fixtures: every test gets its own SQLite file."""

import pytest
from fastapi.testclient import TestClient

from user_management_api.app.core.config import settings
from user_management_api.app.core.db import init_db
from user_management_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh, migrated database."""
    db_path = tmp_path / "users.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    monkeypatch.setattr(settings, "strict_sort", False)
    init_db()
    return db_path


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client
