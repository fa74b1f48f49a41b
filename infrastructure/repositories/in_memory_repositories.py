"""In-Memory Repository Implementations"""
from typing import Optional, Dict
from uuid import uuid4

from domain.repositories import UserRepository
from domain.entities import NewUser, User
from domain.exceptions import DuplicateKeyError


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository"""

    def __init__(self):
        self._storage: Dict[str, User] = {}
        self._ids_by_username: Dict[str, str] = {}

    async def create(self, new_user: NewUser) -> User:
        """Save user to memory"""
        # No await between the check and the insert keeps it atomic on the loop
        if new_user.username in self._ids_by_username:
            raise DuplicateKeyError("username", new_user.username)
        user = User(id=str(uuid4()), **new_user.model_dump())
        self._storage[user.id] = user
        self._ids_by_username[user.username] = user.id
        return user

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        user_id = self._ids_by_username.get(username)
        if user_id is None:
            return None
        return self._storage.get(user_id)

    async def count(self) -> int:
        return len(self._storage)

    async def delete_all(self) -> int:
        removed = len(self._storage)
        self._storage.clear()
        self._ids_by_username.clear()
        return removed
