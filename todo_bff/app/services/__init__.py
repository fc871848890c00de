"""
Service layer abstraction.

Services encapsulate business logic for a domain.  By isolating logic
here the in‑memory store could be swapped for database queries
without touching the GraphQL resolvers.
"""
