# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.result import Err, Ok, Result
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing all users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> Result:
        """
        List all users
        
        Returns:
            Ok(list of UserResponse)
        """
        users = await self.user_repository.find_all()
        if isinstance(users, Err):
            return users
        return Ok([UserResponse.from_user(user) for user in users.value])
