"""
Error classification and formatting for GraphQL responses.

Service exceptions keep their message; this module only adds an
``extensions.code`` so clients can tell user errors from server
failures, and logs every error once.
"""

import logging
from typing import Any, Dict, Iterable

from graphql import GraphQLError

logger = logging.getLogger(__name__)

BAD_USER_INPUT = "BAD_USER_INPUT"
NOT_FOUND = "NOT_FOUND"
GRAPHQL_VALIDATION_FAILED = "GRAPHQL_VALIDATION_FAILED"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def error_code(error: GraphQLError) -> str:
    """Map a GraphQL error to a short machine readable code."""
    original = error.original_error
    if original is None:
        # Raised by graphql-core itself: syntax, validation or coercion.
        return GRAPHQL_VALIDATION_FAILED
    if isinstance(original, LookupError):
        return NOT_FOUND
    if isinstance(original, ValueError):
        return BAD_USER_INPUT
    return INTERNAL_SERVER_ERROR


def format_error(error: GraphQLError) -> Dict[str, Any]:
    """Return the standard error dict with ``extensions.code`` filled in."""
    formatted: Dict[str, Any] = dict(error.formatted)
    extensions = dict(formatted.get("extensions") or {})
    extensions.setdefault("code", error_code(error))
    formatted["extensions"] = extensions
    return formatted


def log_errors(errors: Iterable[GraphQLError]) -> None:
    for error in errors:
        code = error_code(error)
        if code == INTERNAL_SERVER_ERROR:
            logger.error("GraphQL error at %s: %s", error.path, error.message, exc_info=error.original_error)
        else:
            logger.info("GraphQL %s at %s: %s", code, error.path, error.message)
