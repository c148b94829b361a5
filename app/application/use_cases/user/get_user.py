# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.result import Err, Ok, Result
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> Result:
        """
        Get a user by ID
        
        Args:
            user_id: Well-formed user ID
            
        Returns:
            Ok(UserResponse), or Ok(None) if the user does not exist
        """
        found = await self.user_repository.find_by_id(user_id)
        if isinstance(found, Err):
            return found
        if found.value is None:
            return Ok(None)
        return Ok(UserResponse.from_user(found.value))
