# External package imports
from bson import ObjectId


def is_valid_object_id(value: str) -> bool:
    """
    Check that a string is a well-formed MongoDB ObjectId (24 hex characters).
    
    Only the shape is checked; the ID may still not exist in the store.
    """
    return isinstance(value, str) and ObjectId.is_valid(value)
