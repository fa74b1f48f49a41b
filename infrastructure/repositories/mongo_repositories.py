"""MongoDB Repository Implementations"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from domain.repositories import UserRepository
from domain.entities import NewUser, User
from domain.exceptions import DuplicateKeyError
from infrastructure.config import Settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"

# Document field names, kept compatible with existing `users` collections
MONGO_ID = "_id"
USERNAME = "username"
PASSWORD = "password"
FULLNAME = "fullname"


def get_user_collection(settings: Settings) -> AsyncIOMotorCollection:
    """Open the users collection described by the settings"""
    client = AsyncIOMotorClient(settings.mongo_uri)
    return client[settings.mongo_database_name][USERS_COLLECTION]


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def ensure_indexes(self) -> None:
        """Create the unique username index the store relies on"""
        await self.user_collection.create_index([(USERNAME, ASCENDING)], unique=True)
        logger.info(f"Ensured unique index on {USERS_COLLECTION}.{USERNAME}")

    async def create(self, new_user: NewUser) -> User:
        document = {
            USERNAME: new_user.username,
            PASSWORD: new_user.password_digest,
            FULLNAME: new_user.fullname,
        }
        try:
            result = await self.user_collection.insert_one(document)
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(USERNAME, new_user.username) from e
        document[MONGO_ID] = result.inserted_id
        return self._document_to_user(document)

    async def find_by_username(self, username: str) -> Optional[User]:
        document = await self.user_collection.find_one({USERNAME: username})
        if document is None:
            return None
        return self._document_to_user(document)

    async def count(self) -> int:
        return await self.user_collection.count_documents({})

    async def delete_all(self) -> int:
        result = await self.user_collection.delete_many({})
        return result.deleted_count

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[MONGO_ID]),
            username=document[USERNAME],
            password_digest=document[PASSWORD],
            fullname=document.get(FULLNAME),
        )
