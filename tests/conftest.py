"""
Shared pytest fixtures for user management API tests.
"""
import os
from typing import Dict, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.core.errors import classify_exception
from app.di.base_container import BaseContainer
from app.di.container import set_container
from app.di.providers import UserProvider
from app.domain.models.user import UNSET, User, UserPatch
from app.domain.repositories.user_repository import UserRepository
from app.domain.result import Err, Ok, Result
from app.infrastructure.db.mongo_connection import MongoStore


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_users_db",
        "BCRYPT_ROUNDS": "4",
        "PORT": "8080",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.core.security.get_settings", return_value=mock
    ), patch("app.infrastructure.db.mongo_connection.get_settings", return_value=mock):
        yield mock


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed UserRepository with the same contract as the Mongo one,
    including the unique email constraint.
    """

    def __init__(self) -> None:
        self.documents: Dict[str, dict] = {}

    def _email_taken(self, email: str, except_id: Optional[str] = None) -> bool:
        return any(
            doc["email"] == email and user_id != except_id
            for user_id, doc in self.documents.items()
        )

    @staticmethod
    def _duplicate() -> Err:
        error = DuplicateKeyError("E11000 duplicate key error collection: users index: email_1", 11000)
        return Err(classify_exception(error))

    async def create(self, user: User) -> Result:
        if self._email_taken(user.email):
            return self._duplicate()
        user_id = str(ObjectId())
        self.documents[user_id] = {"email": user.email, "password": user.hashed_password}
        return Ok(User(id=user_id, email=user.email, hashed_password=user.hashed_password))

    async def find_all(self) -> Result:
        return Ok([User(id=user_id, email=doc["email"]) for user_id, doc in self.documents.items()])

    async def find_by_id(self, user_id: str) -> Result:
        doc = self.documents.get(user_id)
        if doc is None:
            return Ok(None)
        return Ok(User(id=user_id, email=doc["email"]))

    async def update(self, user_id: str, patch: UserPatch) -> Result:
        doc = self.documents.get(user_id)
        if doc is None:
            return Ok(None)
        if patch.email is not UNSET:
            if self._email_taken(patch.email, except_id=user_id):
                return self._duplicate()
            doc["email"] = patch.email
        if patch.password is not UNSET:
            doc["password"] = patch.password
        return Ok(User(id=user_id, email=doc["email"], hashed_password=doc["password"]))

    async def delete(self, user_id: str) -> Result:
        doc = self.documents.pop(user_id, None)
        if doc is None:
            return Ok(None)
        return Ok(User(id=user_id, email=doc["email"]))


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def mock_store():
    """MongoStore stand-in so the app lifespan never opens a real connection."""
    store = MagicMock(spec=MongoStore)
    store.connect = AsyncMock()
    store.disconnect = AsyncMock()
    return store


@pytest.fixture
def test_container(mock_store, user_repository):
    container = BaseContainer()
    container.register_singleton(MongoStore, mock_store)
    container.register_singleton(UserRepository, user_repository)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(test_container):
    """Test client over the real app with an in-memory user store."""
    from fastapi.testclient import TestClient
    from app.main import app

    set_container(test_container)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        set_container(None)
