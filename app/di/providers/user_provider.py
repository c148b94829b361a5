from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User management use case provider - registers all user CRUD use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            CreateUserUseCase,
            ListUsersUseCase,
            GetUserUseCase,
            UpdateUserUseCase,
            DeleteUserUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    user_repository=container.get(UserRepository)
                )
            )
