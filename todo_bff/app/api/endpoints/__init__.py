"""
Plain HTTP endpoints.

Each module defines an APIRouter; they are aggregated in
``todo_bff.app.api.router`` together with the GraphQL router.
"""
