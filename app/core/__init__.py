from .config import Settings, get_settings
from .errors import NormalizedError, classify_exception, normalize_error
from .security import (
    hash_password,
    hash_password_async,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "NormalizedError",
    "classify_exception",
    "normalize_error",
    "hash_password",
    "hash_password_async",
    "verify_password",
]
