# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database store (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on the store
    3. Use cases (UserProvider) - depend on repositories
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        UserProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        Container with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[BaseContainer]) -> None:
    """Replace the global container; None resets it to be rebuilt on next use"""
    global _container
    _container = container
