"""
Application package initializer.

This package contains the main entrypoint for the Backend for Frontend
(BFF) service and all of its submodules.  The code is split into
configuration and storage (``core``), pydantic payloads (``schemas``),
business logic (``services``) and the transport layer (``api``), which
exposes the GraphQL endpoint and the liveness check.
"""

from .main import app  # noqa: F401
