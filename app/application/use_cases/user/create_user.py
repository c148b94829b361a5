# Standard library imports
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.result import Err, Ok, Result
from ....core.security import hash_password_async
from ...dto.user_dto import UserResponse
from ...validation import validate_create


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, payload: Any) -> Result:
        """
        Create a new user
        
        Args:
            payload: Raw request body
            
        Returns:
            Ok(UserResponse) with the created user, or Err on validation
            failure or duplicate email
        """
        validated = validate_create(payload)
        if isinstance(validated, Err):
            return validated
        request = validated.value
        
        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            hashed_password=await hash_password_async(request.password),
        )
        
        saved = await self.user_repository.create(new_user)
        if isinstance(saved, Err):
            return saved
        
        return Ok(UserResponse.from_user(saved.value))
