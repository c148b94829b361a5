from abc import ABC, abstractmethod
from ..models.user import User, UserPatch
from ..result import Result


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.
    
    Every method returns a Result. Ok(None) means the user does not exist;
    store errors come back as Err instead of being raised.
    """
    
    @abstractmethod
    async def create(self, user: User) -> Result:
        """Insert a new user, Ok(User) with the generated ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> Result:
        """Ok(list of User) without password hashes"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Result:
        """Ok(User) or Ok(None)"""
        pass
    
    @abstractmethod
    async def update(self, user_id: str, patch: UserPatch) -> Result:
        """Apply a patch whose password is already hashed, Ok(updated User) or Ok(None)"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> Result:
        """Ok(deleted User) or Ok(None)"""
        pass
