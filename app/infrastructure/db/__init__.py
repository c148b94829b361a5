from .mongo_connection import MongoStore
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "MongoStore",
    "MongoUserRepository",
]
