from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_connection import MongoStore
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Repositories resolve their collection from the store on each call,
        so they can be built before the store connects.
        """
        store = container.get(MongoStore)
        
        container.register_singleton(
            UserRepository,
            MongoUserRepository(store=store)
        )
