"""
Top‑level router for the Todo BFF.

Aggregates the liveness endpoint and the GraphQL router.  New plain
HTTP endpoints should be added to ``endpoints`` and included here.
"""

from fastapi import APIRouter

from .endpoints import health
from .graphql.router import create_graphql_router

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(create_graphql_router(), prefix="/graphql", tags=["graphql"])
