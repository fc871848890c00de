"""
End-to-end tests of the HTTP surface: /health and the GraphQL endpoint.
"""
import pytest
from fastapi.testclient import TestClient
from graphql import GraphQLError
from strawberry.types import ExecutionResult

from todo_bff.app.api.graphql.errors import error_code, format_error
from todo_bff.app.api.graphql.router import create_graphql_router
from todo_bff.app.core.config import settings
from todo_bff.app.main import app
from todo_bff.app.services.todo_service import TodoNotFoundError

TODO_FIELDS = "id title description completed priority category dueDate createdAt updatedAt"


def gql(client, query, variables=None):
    payload = {"query": query}
    if variables is not None:
        payload["variables"] = variables
    response = client.post("/graphql", json=payload)
    assert response.status_code == 200
    return response.json()


def create(client, **fields):
    body = gql(
        client,
        "mutation($input: TodoInput!) { createTodo(input: $input) { %s } }" % TODO_FIELDS,
        {"input": fields},
    )
    return body["data"]["createTodo"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert "timestamp" in body


def test_startup_loads_demo_data(monkeypatch, store):
    monkeypatch.setattr(settings, "seed_demo_data", True)
    with TestClient(app) as client:
        body = gql(client, "{ todosCount }")
    assert body["data"]["todosCount"] == 3


def test_create_and_fetch(client):
    todo = create(client, title="Write docs", category="Work", priority="HIGH", dueDate="2024-02-01")
    assert todo["title"] == "Write docs"
    assert todo["description"] == ""
    assert todo["completed"] is False
    assert todo["priority"] == "HIGH"
    assert todo["dueDate"] == "2024-02-01"

    body = gql(client, "query($id: ID!) { todo(id: $id) { id title category } }", {"id": todo["id"]})
    assert body["data"]["todo"] == {"id": todo["id"], "title": "Write docs", "category": "Work"}


def test_create_blank_title_returns_message(client):
    body = gql(
        client,
        "mutation { createTodo(input: {title: \"  \"}) { id } }",
    )
    assert body["data"] is None
    error = body["errors"][0]
    assert error["message"] == "Title is required"
    assert error["extensions"]["code"] == "BAD_USER_INPUT"
    assert error["path"] == ["createTodo"]


def test_unknown_todo_returns_not_found(client):
    body = gql(client, "{ todo(id: \"nope\") { id } }")
    assert body["data"]["todo"] is None
    assert body["errors"][0]["message"] == "Todo not found"
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_delete_unknown_todo(client):
    body = gql(client, "mutation { deleteTodo(id: \"nope\") }")
    assert body["errors"][0]["message"] == "Todo not found"


def test_list_filters_sort_and_pagination(client):
    for title, priority in (("low", "LOW"), ("urgent", "URGENT"), ("high", "HIGH")):
        create(client, title=title, priority=priority)

    body = gql(client, "{ todos { title } }")
    assert [t["title"] for t in body["data"]["todos"]] == ["urgent", "high", "low"]

    body = gql(
        client,
        "query($p: Pagination) { todos(pagination: $p) { title } }",
        {"p": {"limit": 2, "offset": 1}},
    )
    assert [t["title"] for t in body["data"]["todos"]] == ["high", "low"]

    body = gql(
        client,
        "query($f: TodoFilters) { todos(filters: $f) { title } }",
        {"f": {"priority": "LOW"}},
    )
    assert [t["title"] for t in body["data"]["todos"]] == ["low"]


def test_counts_match_lists(client, seeded):
    body = gql(
        client,
        """
        {
          done: todos(filters: {completed: true}) { id completed }
          todosCount
          completedTodosCount
          pendingTodosCount
          doneCount: todosCount(filters: {completed: true})
        }
        """,
    )
    data = body["data"]
    assert all(t["completed"] for t in data["done"])
    assert data["completedTodosCount"] == len(data["done"]) == data["doneCount"]
    assert data["completedTodosCount"] + data["pendingTodosCount"] == data["todosCount"]


def test_update_toggle_and_priority(client):
    todo = create(client, title="Draft")
    body = gql(
        client,
        "mutation($id: ID!) { updateTodo(id: $id, input: {description: \"more\"}) { title description } }",
        {"id": todo["id"]},
    )
    assert body["data"]["updateTodo"] == {"title": "Draft", "description": "more"}

    toggle = "mutation($id: ID!) { toggleTodo(id: $id) { completed } }"
    assert gql(client, toggle, {"id": todo["id"]})["data"]["toggleTodo"]["completed"] is True
    assert gql(client, toggle, {"id": todo["id"]})["data"]["toggleTodo"]["completed"] is False

    body = gql(
        client,
        "mutation($id: ID!) { updateTodoPriority(id: $id, priority: URGENT) { priority } }",
        {"id": todo["id"]},
    )
    assert body["data"]["updateTodoPriority"]["priority"] == "URGENT"


def test_update_blank_title(client):
    todo = create(client, title="Draft")
    body = gql(
        client,
        "mutation($id: ID!) { updateTodo(id: $id, input: {title: \"\"}) { id } }",
        {"id": todo["id"]},
    )
    assert body["errors"][0]["message"] == "Title cannot be empty"


def test_bulk_mutations(client):
    ids = [create(client, title=str(i))["id"] for i in range(2)]
    body = gql(
        client,
        "mutation($ids: [ID!]!) { markTodosCompleted(ids: $ids) { id completed } }",
        {"ids": ids + ["missing"]},
    )
    assert sorted(t["id"] for t in body["data"]["markTodosCompleted"]) == sorted(ids)

    body = gql(client, "mutation($ids: [ID!]!) { deleteTodos(ids: $ids) }", {"ids": ids + ["missing"]})
    assert body["data"]["deleteTodos"] is False
    assert gql(client, "{ todosCount }")["data"]["todosCount"] == 0

    body = gql(client, "mutation { deleteTodos(ids: []) }")
    assert body["errors"][0]["message"] == "No todo IDs provided"


def test_search_category_and_stats(client, seeded):
    body = gql(
        client,
        """
        {
          searchTodos(term: "graphql") { id }
          todosByCategory(category: "learn") { id }
          todoStats {
            total completed pending completionRate
            priorityStats { priority count }
            categoryStats { category count }
          }
        }
        """,
    )
    data = body["data"]
    assert data["searchTodos"] == [{"id": "1"}]
    assert data["todosByCategory"] == [{"id": "1"}]
    stats = data["todoStats"]
    assert (stats["total"], stats["completed"], stats["pending"]) == (3, 1, 2)
    assert {p["priority"]: p["count"] for p in stats["priorityStats"]} == {
        "LOW": 0,
        "MEDIUM": 1,
        "HIGH": 1,
        "URGENT": 1,
    }
    assert {"category": "Learning", "count": 1} in stats["categoryStats"]


def test_error_codes():
    assert error_code(GraphQLError("bad")) == "GRAPHQL_VALIDATION_FAILED"
    assert error_code(GraphQLError("x", original_error=TodoNotFoundError("1"))) == "NOT_FOUND"
    assert error_code(GraphQLError("x", original_error=ValueError("x"))) == "BAD_USER_INPUT"
    assert error_code(GraphQLError("x", original_error=RuntimeError("x"))) == "INTERNAL_SERVER_ERROR"


def test_format_error_keeps_message_and_existing_code():
    error = GraphQLError("Todo not found", path=["todo"], extensions={"code": "CUSTOM"})
    formatted = format_error(error)
    assert formatted["message"] == "Todo not found"
    assert formatted["path"] == ["todo"]
    assert formatted["extensions"] == {"code": "CUSTOM"}


@pytest.mark.parametrize(
    "pagination, message",
    [
        ("{offset: -1}", "Offset must be non-negative"),
        ("{limit: -2}", "Limit must be non-negative"),
    ],
)
def test_negative_pagination_returns_plain_message(client, seeded, pagination, message):
    body = gql(client, "{ todos(pagination: %s) { id } }" % pagination)
    error = body["errors"][0]
    assert error["message"] == message
    assert error["extensions"]["code"] == "BAD_USER_INPUT"


UPDATE = "mutation($id: ID!, $input: TodoUpdateInput!) { updateTodo(id: $id, input: $input) { %s } }" % TODO_FIELDS


def test_update_null_or_blank_category_resets_to_general(client):
    todo = create(client, title="Errand", category="Home")
    body = gql(client, UPDATE, {"id": todo["id"], "input": {"category": None}})
    assert body["data"]["updateTodo"]["category"] == "General"

    gql(client, UPDATE, {"id": todo["id"], "input": {"category": "Work"}})
    body = gql(client, UPDATE, {"id": todo["id"], "input": {"category": "   "}})
    assert body["data"]["updateTodo"]["category"] == "General"


def test_update_null_due_date_clears_it_and_omitted_fields_stay(client):
    todo = create(
        client,
        title="Report",
        description="quarterly",
        category="Work",
        priority="HIGH",
        dueDate="2024-03-01",
    )
    body = gql(client, UPDATE, {"id": todo["id"], "input": {"dueDate": None}})
    updated = body["data"]["updateTodo"]
    assert updated["dueDate"] is None
    assert (updated["title"], updated["description"], updated["category"], updated["priority"]) == (
        "Report",
        "quarterly",
        "Work",
        "HIGH",
    )


def test_update_null_priority_keeps_priority(client):
    todo = create(client, title="Call", priority="URGENT")
    body = gql(client, UPDATE, {"id": todo["id"], "input": {"priority": None, "title": "Call back"}})
    updated = body["data"]["updateTodo"]
    assert updated["priority"] == "URGENT"
    assert updated["title"] == "Call back"


def test_router_passes_result_extensions_through(run):
    router = create_graphql_router()
    result = ExecutionResult(data={"todosCount": 0}, errors=None, extensions={"tracing": {"version": 1}})
    response = run(router.process_result(None, result))
    assert response == {"data": {"todosCount": 0}, "extensions": {"tracing": {"version": 1}}}


def test_router_omits_empty_extensions(run):
    router = create_graphql_router()
    response = run(router.process_result(None, ExecutionResult(data={"todosCount": 0}, errors=None)))
    assert response == {"data": {"todosCount": 0}}
