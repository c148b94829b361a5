from .user import UNSET, User, UserPatch

__all__ = ["User", "UserPatch", "UNSET"]
