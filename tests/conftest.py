"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path`` with the
migrations applied, so tests never see each other's data.
"""

import uuid
from typing import List

import pytest
from fastapi.testclient import TestClient

from autoservice_api.app.core.config import settings
from autoservice_api.app.core.db import init_db
from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.mechanic import MechanicRead


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "autoservice.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def store(db_path):
    with Store.open() as s:
        yield s


@pytest.fixture
def make_mechanic(store):
    """Insert a mechanic directly through the store and return it."""

    def _make(brands: List[str], max_complexity: int = 10, name: str = "Mechanic") -> MechanicRead:
        mechanic = MechanicRead(
            id=str(uuid.uuid4()),
            name=name,
            brands=brands,
            max_complexity=max_complexity,
        )
        with store.transaction():
            store.insert_mechanic(mechanic)
        return mechanic

    return _make


@pytest.fixture
def client(db_path):
    from autoservice_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client
