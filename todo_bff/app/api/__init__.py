"""
API package.

The BFF exposes a single GraphQL endpoint plus a liveness check.  Both
are collected by ``router.py`` and included in the application without
a prefix.
"""
