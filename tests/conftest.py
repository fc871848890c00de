import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from todo_bff.app.core.store import get_store
from todo_bff.app.main import app
from todo_bff.app.schemas.todo import Priority, TodoRead


@pytest.fixture(autouse=True)
def store():
    """Start every test from an empty in-memory store."""
    todo_store = get_store()
    todo_store.reset()
    yield todo_store
    todo_store.reset()


@pytest.fixture
def seeded(store):
    store.reset(seed=True)
    return store


@pytest.fixture
def client():
    # No context manager: the lifespan hook would load demo data.
    return TestClient(app)


@pytest.fixture
def run():
    return asyncio.run


def make_todo(todo_id, priority=Priority.MEDIUM, minutes=0, **fields):
    """Build a stored task with a creation time ``minutes`` after a fixed base."""
    created = datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes)
    data = {
        "id": todo_id,
        "title": f"Task {todo_id}",
        "priority": priority,
        "created_at": created,
        "updated_at": created,
    }
    data.update(fields)
    return TodoRead(**data)


@pytest.fixture(name="make_todo")
def make_todo_fixture():
    return make_todo
