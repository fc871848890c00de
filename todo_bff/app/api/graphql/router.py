"""
FastAPI router serving the GraphQL schema.

``TodoGraphQLRouter`` adds an ``extensions.code`` to every error in the
response.  The router is mounted under ``/graphql`` by
``todo_bff.app.api.router``.
"""

from fastapi import Request
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionResult

from todo_bff.app.core.config import settings

from .errors import format_error
from .schema import schema


class TodoGraphQLRouter(GraphQLRouter):
    async def process_result(self, request: Request, result: ExecutionResult) -> GraphQLHTTPResponse:
        data: GraphQLHTTPResponse = {"data": result.data}
        if result.errors:
            data["errors"] = [format_error(error) for error in result.errors]
        if result.extensions:
            data["extensions"] = result.extensions
        return data


def create_graphql_router() -> TodoGraphQLRouter:
    """Build the GraphQL router, serving GraphiQL on GET when enabled."""
    return TodoGraphQLRouter(schema, graphql_ide="graphiql" if settings.graphiql else None)
