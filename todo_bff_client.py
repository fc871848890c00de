"""Todo BFF client.

This module defines a small client for the Todo BFF GraphQL API.  It
sends every operation as a ``POST`` to the ``/graphql`` endpoint using
the ``requests`` library and returns plain dictionaries with the
camel‑cased field names of the API.

The client exposes one method per API operation:

* :meth:`list_todos`, :meth:`get_todo`, :meth:`count_todos`,
  :meth:`todos_by_category`, :meth:`completed_count`,
  :meth:`pending_count`, :meth:`search_todos`, :meth:`get_stats`
* :meth:`create_todo`, :meth:`update_todo`, :meth:`delete_todo`,
  :meth:`toggle_todo`, :meth:`mark_todos_completed`,
  :meth:`delete_todos`, :meth:`update_todo_priority`

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``.  On failure ``data`` is ``None`` (or an empty list for list
operations) and ``error`` is a dictionary with the keys ``status_code``
and ``message``; GraphQL errors carry the server message verbatim, e.g.
``"Todo not found"``.  The client never raises for API failures.

The last list returned by :meth:`list_todos` is cached on the client so
that :meth:`get_category_suggestions` can offer categories without an
extra round‑trip.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

TODO_FIELDS = """
    id
    title
    description
    completed
    priority
    category
    dueDate
    createdAt
    updatedAt
"""

LIST_TODOS = """
query GetTodos($filters: TodoFilters, $pagination: Pagination) {
  todos(filters: $filters, pagination: $pagination) { %s }
}
""" % TODO_FIELDS

GET_TODO = """
query GetTodo($id: ID!) {
  todo(id: $id) { %s }
}
""" % TODO_FIELDS

COUNT_TODOS = """
query GetTodosCount($filters: TodoFilters) {
  todosCount(filters: $filters)
}
"""

TODOS_BY_CATEGORY = """
query GetTodosByCategory($category: String!) {
  todosByCategory(category: $category) { %s }
}
""" % TODO_FIELDS

COMPLETED_COUNT = "query GetCompletedCount { completedTodosCount }"

PENDING_COUNT = "query GetPendingCount { pendingTodosCount }"

SEARCH_TODOS = """
query SearchTodos($term: String!) {
  searchTodos(term: $term) { %s }
}
""" % TODO_FIELDS

TODO_STATS = """
query GetTodoStats {
  todoStats {
    total
    completed
    pending
    completionRate
    priorityStats { priority count }
    categoryStats { category count }
  }
}
"""

CREATE_TODO = """
mutation CreateTodo($input: TodoInput!) {
  createTodo(input: $input) { %s }
}
""" % TODO_FIELDS

UPDATE_TODO = """
mutation UpdateTodo($id: ID!, $input: TodoUpdateInput!) {
  updateTodo(id: $id, input: $input) { %s }
}
""" % TODO_FIELDS

DELETE_TODO = """
mutation DeleteTodo($id: ID!) {
  deleteTodo(id: $id)
}
"""

TOGGLE_TODO = """
mutation ToggleTodo($id: ID!) {
  toggleTodo(id: $id) { %s }
}
""" % TODO_FIELDS

MARK_TODOS_COMPLETED = """
mutation MarkTodosCompleted($ids: [ID!]!) {
  markTodosCompleted(ids: $ids) { %s }
}
""" % TODO_FIELDS

DELETE_TODOS = """
mutation DeleteTodos($ids: [ID!]!) {
  deleteTodos(ids: $ids)
}
"""

UPDATE_TODO_PRIORITY = """
mutation UpdateTodoPriority($id: ID!, $priority: Priority!) {
  updateTodoPriority(id: $id, priority: $priority) { %s }
}
""" % TODO_FIELDS

PRIORITY_OPTIONS = [
    {"value": "LOW", "label": "Low"},
    {"value": "MEDIUM", "label": "Medium"},
    {"value": "HIGH", "label": "High"},
    {"value": "URGENT", "label": "Urgent"},
]

DEFAULT_CATEGORY = "General"

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class TodoBFFClient:
    """Client for interacting with the Todo BFF GraphQL API."""

    def __init__(
        self,
        *,
        base_url: str,
        graphql_path: str = "/graphql",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the BFF, e.g. ``http://localhost:4000``.
            graphql_path: Path of the GraphQL endpoint.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.graphql_url = f"{self.base_url}{graphql_path}"
        self.session = session or requests.Session()
        self.timeout = timeout
        self.todos: List[Dict[str, Any]] = []

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Result:
        """Send a GraphQL operation.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the ``data`` member
            of the response.  If the response carries GraphQL errors the
            first error message is reported in ``error``.
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        try:
            logger.debug("Sending GraphQL request to %s", self.graphql_url)
            response = self.session.post(self.graphql_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("API request failed (%s): %s", status, exc)
            return None, {"status_code": status, "message": str(exc)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        try:
            body = response.json()
        except ValueError as exc:
            logger.error("API returned invalid JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

        errors = body.get("errors")
        if errors:
            message = errors[0].get("message") or "Unknown GraphQL error"
            logger.warning("GraphQL error: %s", message)
            return None, {
                "status_code": response.status_code,
                "message": message,
                "code": (errors[0].get("extensions") or {}).get("code"),
            }
        return body.get("data") or {}, None

    def _field(self, query: str, field: str, variables: Optional[Dict[str, Any]] = None) -> Result:
        data, error = self._execute(query, variables)
        if error:
            return None, error
        return data.get(field), None

    def _list_field(self, query: str, field: str, variables: Optional[Dict[str, Any]] = None) -> Result:
        data, error = self._field(query, field, variables)
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @staticmethod
    def _filters(
        completed: Optional[bool],
        category: Optional[str],
        priority: Optional[str],
    ) -> Dict[str, Any]:
        """Drop unset filter values; ``None`` means "do not filter"."""
        values = {"completed": completed, "category": category, "priority": priority}
        return {key: value for key, value in values.items() if value is not None}

    def list_todos(
        self,
        *,
        completed: Optional[bool] = None,
        category: Optional[str] = None,
        priority: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Result:
        """Retrieve tasks, optionally filtered and paginated.

        The returned list also replaces the client's cached ``todos``.
        """
        filters = self._filters(completed, category, priority)
        pagination = {
            key: value for key, value in {"limit": limit, "offset": offset}.items() if value is not None
        }
        variables: Dict[str, Any] = {}
        if filters:
            variables["filters"] = filters
        if pagination:
            variables["pagination"] = pagination
        todos, error = self._list_field(LIST_TODOS, "todos", variables)
        if not error:
            self.todos = todos
        return todos, error

    def get_todo(self, todo_id: str) -> Result:
        return self._field(GET_TODO, "todo", {"id": todo_id})

    def count_todos(
        self,
        *,
        completed: Optional[bool] = None,
        category: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> Result:
        filters = self._filters(completed, category, priority)
        return self._field(COUNT_TODOS, "todosCount", {"filters": filters} if filters else None)

    def todos_by_category(self, category: str) -> Result:
        return self._list_field(TODOS_BY_CATEGORY, "todosByCategory", {"category": category})

    def completed_count(self) -> Result:
        return self._field(COMPLETED_COUNT, "completedTodosCount")

    def pending_count(self) -> Result:
        return self._field(PENDING_COUNT, "pendingTodosCount")

    def search_todos(self, term: str) -> Result:
        return self._list_field(SEARCH_TODOS, "searchTodos", {"term": term})

    def get_stats(self) -> Result:
        """Retrieve dashboard statistics.

        ``priorityStats`` and ``categoryStats`` are returned as mappings
        (``{"HIGH": 2, ...}``) rather than the lists the API sends.
        """
        stats, error = self._field(TODO_STATS, "todoStats")
        if error or stats is None:
            return stats, error
        stats = dict(stats)
        stats["priorityStats"] = {item["priority"]: item["count"] for item in stats.get("priorityStats") or []}
        stats["categoryStats"] = {item["category"]: item["count"] for item in stats.get("categoryStats") or []}
        return stats, None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_todo(
        self,
        title: str,
        *,
        description: Optional[str] = None,
        priority: Optional[str] = None,
        category: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> Result:
        todo_input: Dict[str, Any] = {"title": title}
        for key, value in (
            ("description", description),
            ("priority", priority),
            ("category", category),
            ("dueDate", due_date),
        ):
            if value is not None:
                todo_input[key] = value
        todo, error = self._field(CREATE_TODO, "createTodo", {"input": todo_input})
        if todo:
            self.todos = [todo] + self.todos
        return todo, error

    def update_todo(self, todo_id: str, **changes: Any) -> Result:
        """Update a task.

        Keyword arguments use the API's field names (``title``,
        ``description``, ``priority``, ``category``, ``dueDate``).  Only
        the given fields are sent.
        """
        todo, error = self._field(UPDATE_TODO, "updateTodo", {"id": todo_id, "input": changes})
        if todo:
            self._replace_cached([todo])
        return todo, error

    def delete_todo(self, todo_id: str) -> Result:
        deleted, error = self._field(DELETE_TODO, "deleteTodo", {"id": todo_id})
        if deleted:
            self.todos = [todo for todo in self.todos if todo.get("id") != todo_id]
        return bool(deleted), error

    def toggle_todo(self, todo_id: str) -> Result:
        todo, error = self._field(TOGGLE_TODO, "toggleTodo", {"id": todo_id})
        if todo:
            self._replace_cached([todo])
        return todo, error

    def mark_todos_completed(self, todo_ids: List[str]) -> Result:
        todos, error = self._list_field(MARK_TODOS_COMPLETED, "markTodosCompleted", {"ids": todo_ids})
        if todos:
            self._replace_cached(todos)
        return todos, error

    def delete_todos(self, todo_ids: List[str]) -> Result:
        deleted, error = self._field(DELETE_TODOS, "deleteTodos", {"ids": todo_ids})
        if deleted:
            self.todos = [todo for todo in self.todos if todo.get("id") not in todo_ids]
        return bool(deleted), error

    def update_todo_priority(self, todo_id: str, priority: str) -> Result:
        todo, error = self._field(UPDATE_TODO_PRIORITY, "updateTodoPriority", {"id": todo_id, "priority": priority})
        if todo:
            self._replace_cached([todo])
        return todo, error

    # ------------------------------------------------------------------
    # Cache helpers
    # ------------------------------------------------------------------
    def _replace_cached(self, updated: List[Dict[str, Any]]) -> None:
        by_id = {todo["id"]: todo for todo in updated}
        self.todos = [by_id.get(todo.get("id"), todo) for todo in self.todos]

    def get_category_suggestions(self) -> List[str]:
        """Distinct categories of the cached tasks, excluding the default."""
        seen: List[str] = []
        for todo in self.todos:
            category = todo.get("category")
            if category and category != DEFAULT_CATEGORY and category not in seen:
                seen.append(category)
        return seen

    @staticmethod
    def get_priority_options() -> List[Dict[str, str]]:
        return [dict(option) for option in PRIORITY_OPTIONS]
