from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from pastebin.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Physically delete a user row"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users, newest first"""
        pass
