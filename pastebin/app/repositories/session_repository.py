from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from pastebin.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: str) -> Optional[Session]:
        """Get session by its token"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: str) -> bool:
        """Delete a session. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions of a user. Returns count."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions whose expires_at has passed. Returns count."""
        pass

    @abstractmethod
    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count sessions of a user"""
        pass
