"""
Pydantic models for to‑do items.

``TodoRead`` is the record kept in the in‑memory store and returned by
the service layer.  ``TodoCreate`` and ``TodoUpdate`` carry client
input; title rules are enforced by the service so that clients receive
the plain messages ("Title is required", ...) rather than pydantic's
validation report.  ``TodoFilters`` and ``Pagination`` describe list
queries and ``TodoStats`` the dashboard aggregates.
"""

from datetime import date, datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Priority(str, Enum):
    """Priority of a task, from least to most pressing."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


# Sort rank used when ordering lists: higher comes first.
PRIORITY_RANK: Dict[Priority, int] = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.URGENT: 4,
}

DEFAULT_CATEGORY = "General"
TITLE_MAX_LENGTH = 100


class TodoCreate(BaseModel):
    """Schema for creating a new task."""

    title: str = Field(..., examples=["Learn GraphQL"])
    description: Optional[str] = Field(None, examples=["Understand GraphQL basics"])
    priority: Optional[Priority] = Field(None, description="Defaults to MEDIUM")
    category: Optional[str] = Field(None, description="Defaults to 'General'")
    due_date: Optional[date] = Field(None, examples=["2024-01-15"])


class TodoUpdate(BaseModel):
    """Schema for updating a task.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    category: Optional[str] = None
    due_date: Optional[date] = None


class TodoRead(BaseModel):
    """A stored task as returned by the service layer."""

    id: str
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category: str = DEFAULT_CATEGORY
    due_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class TodoFilters(BaseModel):
    """Optional list filters; ``None`` means "do not filter on this field"."""

    completed: Optional[bool] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None


class Pagination(BaseModel):
    """Offset/limit window applied after filtering and sorting."""

    limit: Optional[int] = None
    offset: int = 0


class TodoStats(BaseModel):
    """Aggregated numbers for the dashboard."""

    total: int
    completed: int
    pending: int
    completion_rate: float = Field(..., description="Percentage of completed tasks, 0-100")
    priority_stats: Dict[Priority, int]
    category_stats: Dict[str, int]
