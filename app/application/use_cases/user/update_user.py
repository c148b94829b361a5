# Standard library imports
from dataclasses import replace
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import UNSET
from ....domain.result import Err, Ok, Result
from ....core.security import hash_password_async
from ...dto.user_dto import UserResponse
from ...validation import validate_update


class UpdateUserUseCase:
    """Use case for partially updating a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, payload: Any) -> Result:
        """
        Update a user's email and/or password
        
        The user must exist before the payload is validated, so an unknown ID
        is reported as not found even when the body is also invalid.
        
        Args:
            user_id: Well-formed user ID
            payload: Raw request body
            
        Returns:
            Ok(UserResponse) with the updated user, Ok(None) if the user does
            not exist, or Err on validation failure or duplicate email
        """
        existing = await self.user_repository.find_by_id(user_id)
        if isinstance(existing, Err):
            return existing
        if existing.value is None:
            return Ok(None)
        
        validated = validate_update(payload)
        if isinstance(validated, Err):
            return validated
        patch = validated.value
        
        if patch.password is not UNSET:
            patch = replace(patch, password=await hash_password_async(patch.password))
        
        updated = await self.user_repository.update(user_id, patch)
        if isinstance(updated, Err):
            return updated
        if updated.value is None:
            return Ok(None)
        return Ok(UserResponse.from_user(updated.value))
