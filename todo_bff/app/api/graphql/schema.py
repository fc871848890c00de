"""
GraphQL schema for the Todo BFF.

Resolvers are thin: they convert GraphQL inputs to service payloads,
delegate to ``TodoService`` and convert the results back.  Exceptions
raised by the service propagate unchanged so their messages reach the
client as GraphQL errors.
"""

from typing import List, Optional

import strawberry
from strawberry.types import ExecutionContext

from todo_bff.app.services.todo_service import TodoNotFoundError, TodoService

from .errors import log_errors
from .types import Pagination, Priority, Todo, TodoFilters, TodoInput, TodoStats, TodoUpdateInput


def _to_todos(todos) -> List[Todo]:
    return [Todo.from_model(todo) for todo in todos]


@strawberry.type
class Query:
    @strawberry.field(description="Tasks matching the filters, sorted by priority then newest first")
    async def todos(
        self,
        filters: Optional[TodoFilters] = None,
        pagination: Optional[Pagination] = None,
    ) -> List[Todo]:
        todos = await TodoService.list_todos(
            filters.to_model() if filters else None,
            pagination.to_model() if pagination else None,
        )
        return _to_todos(todos)

    @strawberry.field(description="A single task; errors with 'Todo not found' for unknown ids")
    async def todo(self, id: strawberry.ID) -> Optional[Todo]:
        todo = await TodoService.get_todo(str(id))
        if todo is None:
            raise TodoNotFoundError(str(id))
        return Todo.from_model(todo)

    @strawberry.field(description="Number of tasks matching the filters")
    async def todos_count(self, filters: Optional[TodoFilters] = None) -> int:
        return await TodoService.count_todos(filters.to_model() if filters else None)

    @strawberry.field
    async def todos_by_category(self, category: str) -> List[Todo]:
        return _to_todos(await TodoService.todos_by_category(category))

    @strawberry.field
    async def completed_todos_count(self) -> int:
        return await TodoService.completed_todos_count()

    @strawberry.field
    async def pending_todos_count(self) -> int:
        return await TodoService.pending_todos_count()

    @strawberry.field(description="Tasks whose title, description or category contain the term")
    async def search_todos(self, term: str) -> List[Todo]:
        return _to_todos(await TodoService.search_todos(term))

    @strawberry.field
    async def todo_stats(self) -> TodoStats:
        return TodoStats.from_model(await TodoService.get_statistics())


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_todo(self, input: TodoInput) -> Todo:
        return Todo.from_model(await TodoService.create_todo(input.to_model()))

    @strawberry.mutation
    async def update_todo(self, id: strawberry.ID, input: TodoUpdateInput) -> Todo:
        return Todo.from_model(await TodoService.update_todo(str(id), input.to_model()))

    @strawberry.mutation
    async def delete_todo(self, id: strawberry.ID) -> bool:
        return await TodoService.delete_todo(str(id))

    @strawberry.mutation
    async def toggle_todo(self, id: strawberry.ID) -> Todo:
        return Todo.from_model(await TodoService.toggle_todo(str(id)))

    @strawberry.mutation(description="Completes every listed task that exists and returns those")
    async def mark_todos_completed(self, ids: List[strawberry.ID]) -> List[Todo]:
        return _to_todos(await TodoService.mark_todos_completed([str(i) for i in ids]))

    @strawberry.mutation(description="True only if every listed task was deleted")
    async def delete_todos(self, ids: List[strawberry.ID]) -> bool:
        return await TodoService.delete_todos([str(i) for i in ids])

    @strawberry.mutation
    async def update_todo_priority(self, id: strawberry.ID, priority: Priority) -> Todo:
        return Todo.from_model(await TodoService.update_todo_priority(str(id), priority))


class TodoSchema(strawberry.Schema):
    """Schema that routes error reporting through the application logger."""

    def process_errors(self, errors, execution_context: Optional[ExecutionContext] = None) -> None:
        log_errors(errors)


schema = TodoSchema(query=Query, mutation=Mutation)
