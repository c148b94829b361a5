"""
API layer for the User Management API.

Exposes the user CRUD endpoints under /api/users and the shared error
handlers that normalize request validation failures.
"""
