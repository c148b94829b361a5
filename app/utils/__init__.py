"""Utility modules for the user management application."""

from .object_id import is_valid_object_id

__all__ = [
    "is_valid_object_id",
]
