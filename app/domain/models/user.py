from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    # None when loaded with the password projected out
    hashed_password: Optional[str] = None

    def __post_init__(self):
        """
        Business validations for users about to be created.
        
        Stored users (with an ID) are loaded as-is, so one bad document
        cannot break reads of the others.
        """
        if self.id is not None:
            return
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if self.hashed_password == "":
            raise ValueError("Password hash cannot be empty")


class _Unset:
    """Marker for a patch field that was not provided"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class UserPatch:
    """
    Partial update of a user.
    
    Every field is either UNSET or the new value. The password field holds
    plaintext only until the update use case replaces it with a hash.
    """
    email: Union[str, _Unset] = UNSET
    password: Union[str, _Unset] = UNSET

    def is_empty(self) -> bool:
        return self.email is UNSET and self.password is UNSET
