"""
In‑memory task storage.

All tasks live in a single process‑wide list held by ``TodoStore``.
Nothing survives a restart and there is no locking: the service is a
single‑tenant demo.  ``init_store`` plays the role a database
migration step would play in a persistent deployment and loads the
demo records on startup.
"""

import logging
from datetime import date, datetime, timezone
from typing import Iterator, List, Optional

from todo_bff.app.schemas.todo import Priority, TodoRead

from .config import settings

logger = logging.getLogger(__name__)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


DEMO_TODOS = [
    {
        "id": "1",
        "title": "Learn GraphQL",
        "description": "Understand GraphQL basics and Apollo Server",
        "completed": False,
        "priority": Priority.HIGH,
        "category": "Learning",
        "due_date": date(2024, 1, 15),
        "created_at": _ts("2024-01-01T10:00:00"),
        "updated_at": _ts("2024-01-01T10:00:00"),
    },
    {
        "id": "2",
        "title": "Build BFF Architecture",
        "description": "Implement Backend for Frontend pattern",
        "completed": False,
        "priority": Priority.URGENT,
        "category": "Development",
        "due_date": date(2024, 1, 20),
        "created_at": _ts("2024-01-01T11:00:00"),
        "updated_at": _ts("2024-01-01T11:00:00"),
    },
    {
        "id": "3",
        "title": "Create Angular Frontend",
        "description": "Build responsive Angular UI for todo app",
        "completed": True,
        "priority": Priority.MEDIUM,
        "category": "Frontend",
        "due_date": date(2024, 1, 10),
        "created_at": _ts("2024-01-01T12:00:00"),
        "updated_at": _ts("2024-01-01T12:00:00"),
    },
]


class TodoStore:
    """Ordered list of tasks with id lookup helpers."""

    def __init__(self) -> None:
        self._todos: List[TodoRead] = []

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[TodoRead]:
        return iter(list(self._todos))

    def all(self) -> List[TodoRead]:
        """Return a shallow copy of the stored tasks in insertion order."""
        return list(self._todos)

    def index_of(self, todo_id: str) -> int:
        """Return the list position of ``todo_id`` or ``-1`` if absent."""
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return -1

    def get(self, todo_id: str) -> Optional[TodoRead]:
        index = self.index_of(todo_id)
        return self._todos[index] if index >= 0 else None

    def add(self, todo: TodoRead) -> None:
        self._todos.append(todo)

    def replace(self, index: int, todo: TodoRead) -> None:
        self._todos[index] = todo

    def remove(self, index: int) -> None:
        del self._todos[index]

    def reset(self, seed: bool = False) -> None:
        """Drop every task and optionally reload the demo records."""
        self._todos = []
        if seed:
            self._todos = [TodoRead(**data) for data in DEMO_TODOS]


_store = TodoStore()


def get_store() -> TodoStore:
    """Return the process‑wide store."""
    return _store


def init_store() -> None:
    """Load demo data into an empty store when enabled in settings."""
    store = get_store()
    if settings.seed_demo_data and len(store) == 0:
        store.reset(seed=True)
        logger.info("Loaded %d demo tasks into the in-memory store", len(store))
