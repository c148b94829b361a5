from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the store"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB store in the container.
        The store is created unconnected; the application lifespan calls
        connect() on startup and disconnect() on shutdown.
        """
        container.register_singleton(MongoStore, MongoStore())
