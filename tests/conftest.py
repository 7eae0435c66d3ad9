from __future__ import annotations

from datetime import datetime

import pytest

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.database.kv_store import MemoryKeyValueStore
from src.school_attendance.school_attendance.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 7, 9, 5, 0)


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def seeded(container):
    container.initialize_storage()
    return container


@pytest.fixture
def app(store):
    app = create_app("config.testing", store=store)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(email: str, role: str):
        return client.post("/api/login", json={"email": email, "role": role})

    return _login
