"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import NewUser, User


class UserRepository(ABC):
    """Repository interface for User records"""

    @abstractmethod
    async def create(self, new_user: NewUser) -> User:
        """Persist a user, raising DuplicateKeyError if the username exists"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored users"""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every user, returning how many were removed"""
        pass
