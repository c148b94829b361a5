"""
User Management API — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models, use cases, and the MongoDB infrastructure backing them.
"""
