"""
GraphQL object and input types.

The types mirror the pydantic models in ``todo_bff.app.schemas.todo``.
Output types are built from service results with ``from_model`` and
input types are converted to service payloads with ``to_model``.
Field names are camel‑cased by strawberry (``due_date`` becomes
``dueDate``).
"""

from datetime import date, datetime
from typing import List, Optional

import strawberry

from todo_bff.app.schemas import todo as schemas

Priority = strawberry.enum(schemas.Priority, description="Task priority, LOW to URGENT")


@strawberry.type(description="A task on the to-do list")
class Todo:
    id: strawberry.ID
    title: str
    description: str
    completed: bool
    priority: Priority
    category: str
    due_date: Optional[date]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, todo: schemas.TodoRead) -> "Todo":
        return cls(
            id=strawberry.ID(todo.id),
            title=todo.title,
            description=todo.description or "",
            completed=todo.completed,
            priority=todo.priority or schemas.Priority.MEDIUM,
            category=todo.category or schemas.DEFAULT_CATEGORY,
            due_date=todo.due_date,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )


@strawberry.type
class PriorityCount:
    priority: Priority
    count: int


@strawberry.type
class CategoryCount:
    category: str
    count: int


@strawberry.type(description="Aggregated numbers for the dashboard")
class TodoStats:
    total: int
    completed: int
    pending: int
    completion_rate: float
    priority_stats: List[PriorityCount]
    category_stats: List[CategoryCount]

    @classmethod
    def from_model(cls, stats: schemas.TodoStats) -> "TodoStats":
        return cls(
            total=stats.total,
            completed=stats.completed,
            pending=stats.pending,
            completion_rate=stats.completion_rate,
            priority_stats=[
                PriorityCount(priority=priority, count=stats.priority_stats.get(priority, 0))
                for priority in schemas.Priority
            ],
            category_stats=[
                CategoryCount(category=category, count=count)
                for category, count in sorted(stats.category_stats.items())
            ],
        )


@strawberry.input(description="Fields for a new task")
class TodoInput:
    title: str
    description: Optional[str] = None
    priority: Optional[Priority] = None
    category: Optional[str] = None
    due_date: Optional[date] = None

    def to_model(self) -> schemas.TodoCreate:
        return schemas.TodoCreate(
            title=self.title,
            description=self.description,
            priority=self.priority,
            category=self.category,
            due_date=self.due_date,
        )


@strawberry.input(description="Fields to change on an existing task; omitted fields are kept")
class TodoUpdateInput:
    title: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    priority: Optional[Priority] = strawberry.UNSET
    category: Optional[str] = strawberry.UNSET
    due_date: Optional[date] = strawberry.UNSET

    def to_model(self) -> schemas.TodoUpdate:
        fields = ("title", "description", "priority", "category", "due_date")
        provided = {
            name: getattr(self, name)
            for name in fields
            if getattr(self, name) is not strawberry.UNSET
        }
        return schemas.TodoUpdate(**provided)


@strawberry.input
class TodoFilters:
    completed: Optional[bool] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None

    def to_model(self) -> schemas.TodoFilters:
        return schemas.TodoFilters(
            completed=self.completed,
            category=self.category,
            priority=self.priority,
        )


@strawberry.input
class Pagination:
    limit: Optional[int] = None
    offset: Optional[int] = None

    def to_model(self) -> schemas.Pagination:
        return schemas.Pagination(limit=self.limit, offset=self.offset or 0)
