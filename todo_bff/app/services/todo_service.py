"""
Service for managing to‑do items.

``TodoService`` implements every operation exposed by the GraphQL API
on top of the in‑memory ``TodoStore``: filtered and paginated listing,
single item CRUD, completion toggling, bulk completion and deletion,
counts, free text search and dashboard statistics.

Errors are raised as plain exceptions whose messages are meant to be
shown to API clients verbatim: ``TodoNotFoundError`` for unknown
identifiers and ``ValueError`` for invalid input.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from todo_bff.app.core.store import get_store
from todo_bff.app.schemas.todo import (
    DEFAULT_CATEGORY,
    PRIORITY_RANK,
    TITLE_MAX_LENGTH,
    Pagination,
    Priority,
    TodoCreate,
    TodoFilters,
    TodoRead,
    TodoStats,
    TodoUpdate,
)

logger = logging.getLogger(__name__)


class TodoNotFoundError(LookupError):
    """Raised when an operation references an unknown task id."""

    def __init__(self, todo_id: str) -> None:
        super().__init__("Todo not found")
        self.todo_id = todo_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _sort_key(todo: TodoRead):
    return (PRIORITY_RANK.get(todo.priority, 0), todo.created_at)


class TodoService:
    """Service for creating, listing, updating and deleting tasks."""

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _clean_title(title: Optional[str], empty_message: str) -> str:
        """Strip ``title`` and enforce the non‑blank and length rules."""
        cleaned = (title or "").strip()
        if not cleaned:
            raise ValueError(empty_message)
        if len(cleaned) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must be less than {TITLE_MAX_LENGTH} characters")
        return cleaned

    @staticmethod
    def _matches(todo: TodoRead, filters: TodoFilters) -> bool:
        if filters.completed is not None and todo.completed != filters.completed:
            return False
        if filters.category and filters.category.lower() not in todo.category.lower():
            return False
        if filters.priority is not None and todo.priority != filters.priority:
            return False
        return True

    @staticmethod
    def _sorted(todos: Iterable[TodoRead]) -> List[TodoRead]:
        """Order by priority rank, then newest first."""
        return sorted(todos, key=_sort_key, reverse=True)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @classmethod
    async def list_todos(
        cls,
        filters: Optional[TodoFilters] = None,
        pagination: Optional[Pagination] = None,
    ) -> List[TodoRead]:
        """Return tasks matching ``filters``, sorted and paginated.

        Parameters
        ----------
        filters : Optional[TodoFilters]
            ``completed`` must match exactly, ``category`` is a
            case‑insensitive substring match and ``priority`` must match
            exactly.  Unset fields do not filter.
        pagination : Optional[Pagination]
            Window applied to the sorted result: ``offset`` first, then
            ``limit``.  Omitted means the whole result.

        Returns
        -------
        List[TodoRead]
            Tasks ordered by descending priority, ties broken by
            descending creation time.

        Raises
        ------
        ValueError
            If ``offset`` or ``limit`` is negative.
        """
        filters = filters or TodoFilters()
        todos = cls._sorted(t for t in get_store() if cls._matches(t, filters))
        if pagination is not None:
            if pagination.offset < 0:
                raise ValueError("Offset must be non-negative")
            if pagination.limit is not None and pagination.limit < 0:
                raise ValueError("Limit must be non-negative")
            start = pagination.offset
            end = start + pagination.limit if pagination.limit is not None else None
            todos = todos[start:end]
        return todos

    @classmethod
    async def get_todo(cls, todo_id: str) -> Optional[TodoRead]:
        """Return a single task or ``None`` if it does not exist."""
        return get_store().get(todo_id)

    @classmethod
    async def count_todos(cls, filters: Optional[TodoFilters] = None) -> int:
        return len(await cls.list_todos(filters))

    @classmethod
    async def completed_todos_count(cls) -> int:
        return await cls.count_todos(TodoFilters(completed=True))

    @classmethod
    async def pending_todos_count(cls) -> int:
        return await cls.count_todos(TodoFilters(completed=False))

    @classmethod
    async def todos_by_category(cls, category: str) -> List[TodoRead]:
        return await cls.list_todos(TodoFilters(category=category))

    @classmethod
    async def search_todos(cls, term: Optional[str]) -> List[TodoRead]:
        """Case‑insensitive search over title, description and category.

        A blank term returns every task.
        """
        needle = (term or "").strip().lower()
        if not needle:
            return cls._sorted(get_store())
        return cls._sorted(
            todo
            for todo in get_store()
            if needle in todo.title.lower()
            or needle in todo.description.lower()
            or needle in todo.category.lower()
        )

    @classmethod
    async def get_statistics(cls) -> TodoStats:
        """Return totals, completion rate and per priority/category counts."""
        todos = get_store().all()
        total = len(todos)
        completed = sum(1 for todo in todos if todo.completed)
        priority_stats = {priority: 0 for priority in Priority}
        category_stats: dict = {}
        for todo in todos:
            priority_stats[todo.priority] += 1
            category_stats[todo.category] = category_stats.get(todo.category, 0) + 1
        return TodoStats(
            total=total,
            completed=completed,
            pending=total - completed,
            completion_rate=(completed / total) * 100 if total else 0.0,
            priority_stats=priority_stats,
            category_stats=category_stats,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    @classmethod
    async def create_todo(cls, data: TodoCreate) -> TodoRead:
        """Validate ``data`` and append a new task to the store.

        Raises
        ------
        ValueError
            If the title is blank or longer than 100 characters.
        """
        title = cls._clean_title(data.title, "Title is required")
        now = _utcnow()
        todo = TodoRead(
            id=str(uuid.uuid4()),
            title=title,
            description=(data.description or "").strip(),
            completed=False,
            priority=data.priority or Priority.MEDIUM,
            category=(data.category or "").strip() or DEFAULT_CATEGORY,
            due_date=data.due_date,
            created_at=now,
            updated_at=now,
        )
        get_store().add(todo)
        logger.info("Created todo %s", todo.id)
        return todo

    @classmethod
    async def update_todo(cls, todo_id: str, data: TodoUpdate) -> TodoRead:
        """Apply the fields set in ``data`` to an existing task.

        Raises
        ------
        TodoNotFoundError
            If no task has the given id.
        ValueError
            If a supplied title is blank or too long.
        """
        store = get_store()
        index = store.index_of(todo_id)
        if index < 0:
            raise TodoNotFoundError(todo_id)
        changes = data.model_dump(exclude_unset=True)
        if "title" in changes:
            changes["title"] = cls._clean_title(changes["title"], "Title cannot be empty")
        if "description" in changes:
            changes["description"] = (changes["description"] or "").strip()
        if "category" in changes:
            changes["category"] = (changes["category"] or "").strip() or DEFAULT_CATEGORY
        for field in ("completed", "priority"):
            if field in changes and changes[field] is None:
                del changes[field]
        changes["updated_at"] = _utcnow()
        updated = store.get(todo_id).model_copy(update=changes)
        store.replace(index, updated)
        logger.info("Updated todo %s (%s)", todo_id, ", ".join(sorted(changes)))
        return updated

    @classmethod
    async def delete_todo(cls, todo_id: str) -> bool:
        """Remove a task.  Raises ``TodoNotFoundError`` for unknown ids."""
        store = get_store()
        index = store.index_of(todo_id)
        if index < 0:
            raise TodoNotFoundError(todo_id)
        store.remove(index)
        logger.info("Deleted todo %s", todo_id)
        return True

    @classmethod
    async def toggle_todo(cls, todo_id: str) -> TodoRead:
        """Flip the completion flag of a task."""
        todo = await cls.get_todo(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return await cls.update_todo(todo_id, TodoUpdate(completed=not todo.completed))

    @classmethod
    async def update_todo_priority(cls, todo_id: str, priority: Priority) -> TodoRead:
        return await cls.update_todo(todo_id, TodoUpdate(priority=priority))

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------
    @classmethod
    async def mark_todos_completed(cls, todo_ids: List[str]) -> List[TodoRead]:
        """Mark each task as completed, skipping ids that fail.

        Returns
        -------
        List[TodoRead]
            The tasks that were updated, in the order of ``todo_ids``.
        """
        if not todo_ids:
            raise ValueError("No todo IDs provided")
        updated: List[TodoRead] = []
        for todo_id in todo_ids:
            try:
                updated.append(await cls.update_todo(todo_id, TodoUpdate(completed=True)))
            except (LookupError, ValueError) as exc:
                logger.warning("Failed to update todo %s: %s", todo_id, exc)
        return updated

    @classmethod
    async def delete_todos(cls, todo_ids: List[str]) -> bool:
        """Delete each task, skipping ids that fail.

        Returns ``True`` only when every id was deleted.
        """
        if not todo_ids:
            raise ValueError("No todo IDs provided")
        deleted = 0
        for todo_id in todo_ids:
            try:
                await cls.delete_todo(todo_id)
                deleted += 1
            except LookupError as exc:
                logger.warning("Failed to delete todo %s: %s", todo_id, exc)
        return deleted == len(todo_ids)
