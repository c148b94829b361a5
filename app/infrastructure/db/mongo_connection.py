# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class MongoStore:
    """
    Owns the MongoDB client for the lifetime of the process.
    
    Created once, connected on application startup and disconnected on
    shutdown. Repositories receive collections from it through the DI
    container instead of reaching for module-level globals.
    """
    
    def __init__(self, uri: Optional[str] = None, database_name: Optional[str] = None) -> None:
        settings = get_settings()
        self.uri = uri or settings.mongo_uri
        self.database_name = database_name or settings.mongo_database_name
        self._client: Optional[AsyncIOMotorClient] = None
    
    @property
    def is_connected(self) -> bool:
        return self._client is not None
    
    async def connect(self) -> None:
        """
        Open the client and make sure required indexes exist.
        
        The unique index on email is what turns a second insert of the same
        address into a duplicate-key error.
        """
        if self._client is not None:
            return
        
        self._client = AsyncIOMotorClient(self.uri)
        await self.users.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
        logger.info(f"Connected to MongoDB database '{self.database_name}'")
    
    async def disconnect(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        logger.info("MongoDB connection closed")
    
    @property
    def database(self) -> AsyncIOMotorDatabase:
        """
        Get the configured database
        
        Raises:
            RuntimeError: If connect() has not been called
        """
        if self._client is None:
            raise RuntimeError("MongoStore is not connected")
        return self._client[self.database_name]
    
    @property
    def users(self) -> AsyncIOMotorCollection:
        """Users collection"""
        return self.database[USERS_COLLECTION]
