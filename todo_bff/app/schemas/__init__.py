"""
Pydantic schema definitions for service payloads.

The GraphQL layer converts its input objects into these models before
calling the service layer, and converts the returned models back into
GraphQL types.  Keeping them separate decouples the transport from the
business logic.
"""
