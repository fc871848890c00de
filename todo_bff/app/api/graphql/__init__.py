"""
GraphQL transport for the Todo BFF.

``types`` holds the strawberry object and input types, ``schema`` the
Query and Mutation roots, ``errors`` the error codes and ``router`` the
FastAPI router that serves the schema.
"""

from .schema import schema  # noqa: F401
