# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.errors import classify_exception
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import UNSET, User, UserPatch
from ...domain.constants import UserFields
from ...domain.result import Err, Ok, Result
from .mongo_connection import MongoStore

logger = logging.getLogger(__name__)

WITHOUT_PASSWORD = {UserFields.PASSWORD: 0}


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(
        self,
        store: Optional[MongoStore] = None,
        user_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        if store is None and user_collection is None:
            raise ValueError("Either a store or a user collection is required")
        self.store = store
        self._user_collection = user_collection
    
    @property
    def user_collection(self) -> AsyncIOMotorCollection:
        if self._user_collection is not None:
            return self._user_collection
        return self.store.users
    
    async def create(self, user: User) -> Result:
        """
        Insert a new user
        
        Args:
            user: User domain model carrying the password hash
            
        Returns:
            Ok(User) with the generated ID, or Err on duplicate email / store error
        """
        if user.id:
            raise ValueError("New user must not have an ID")
        
        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))
        except PyMongoError as e:
            return self._store_error("creating user", e)
        
        return Ok(User(
            id=str(result.inserted_id),
            email=user.email,
            hashed_password=user.hashed_password,
        ))
    
    async def find_all(self) -> Result:
        """
        List every user with the password projected out
        
        Returns:
            Ok(list of User)
        """
        try:
            cursor = self.user_collection.find({}, WITHOUT_PASSWORD)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            return self._store_error("listing users", e)
        
        return Ok([self._document_to_user(document) for document in documents])
    
    async def find_by_id(self, user_id: str) -> Result:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            Ok(User) without password if found, Ok(None) otherwise
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return Ok(None)
        
        try:
            document = await self.user_collection.find_one(
                {UserFields.MONGO_ID: object_id}, WITHOUT_PASSWORD
            )
        except PyMongoError as e:
            return self._store_error("finding user by ID", e)
        
        if document is None:
            return Ok(None)
        return Ok(self._document_to_user(document))
    
    async def update(self, user_id: str, patch: UserPatch) -> Result:
        """
        Apply a partial update and read the full document back
        
        Args:
            user_id: ID of the user to update
            patch: Fields to set; the password must already be hashed
            
        Returns:
            Ok(updated User) or Ok(None) when no such user exists
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return Ok(None)
        
        changes = {}
        if patch.email is not UNSET:
            changes[UserFields.EMAIL] = patch.email
        if patch.password is not UNSET:
            changes[UserFields.PASSWORD] = patch.password
        if not changes:
            raise ValueError("Patch has no fields to update")
        
        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            return self._store_error("updating user", e)
        
        if document is None:
            return Ok(None)
        return Ok(self._document_to_user(document))
    
    async def delete(self, user_id: str) -> Result:
        """
        Delete user by ID
        
        Returns:
            Ok(deleted User) or Ok(None) when no such user exists
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return Ok(None)
        
        try:
            document = await self.user_collection.find_one_and_delete(
                {UserFields.MONGO_ID: object_id}, projection=WITHOUT_PASSWORD
            )
        except PyMongoError as e:
            return self._store_error("deleting user", e)
        
        if document is None:
            return Ok(None)
        return Ok(self._document_to_user(document))
    
    def _store_error(self, action: str, error: PyMongoError) -> Err:
        failure = classify_exception(error)
        logger.warning(f"Store error while {action}: {failure.kind.value}")
        return Err(failure)
    
    @staticmethod
    def _to_object_id(user_id: str) -> Optional[ObjectId]:
        if not user_id:
            return None
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user.hashed_password:
            raise ValueError("Refusing to store a user without a password hash")
        
        return {
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
        }
