# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.result import Err, Ok, Result


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> Result:
        """
        Delete a user
        
        Returns:
            Ok(True) if a user was deleted, Ok(False) if none existed
        """
        deleted = await self.user_repository.delete(user_id)
        if isinstance(deleted, Err):
            return deleted
        return Ok(deleted.value is not None)
