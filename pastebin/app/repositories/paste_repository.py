from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pastebin.domain.entities import Paste


class IPasteRepository(ABC):
    """Paste repository interface - application layer

    Soft-deleted pastes are invisible to every read method.
    """

    @abstractmethod
    async def get_by_id(self, paste_id: str) -> Optional[Paste]:
        """Get a paste that has not been soft-deleted"""
        pass

    @abstractmethod
    async def find_by_content_hash(
        self, content_hash: str, owner_id: Optional[UUID], now: datetime
    ) -> Optional[Paste]:
        """
        Find a live paste with this fingerprint in the given owner scope.

        owner_id None matches anonymous pastes only.
        """
        pass

    @abstractmethod
    async def create(self, paste: Paste) -> Paste:
        """Create a new paste"""
        pass

    @abstractmethod
    async def update(self, paste: Paste) -> Paste:
        """Update existing paste"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID, now: datetime) -> List[Paste]:
        """Live pastes of an owner, newest first"""
        pass

    @abstractmethod
    async def list_public(self, now: datetime) -> List[Paste]:
        """Live pastes that are neither private nor unlisted, newest first"""
        pass

    @abstractmethod
    async def search_by_owner(
        self, owner_id: UUID, query: str, now: datetime
    ) -> List[Paste]:
        """Substring match on title or content among an owner's live pastes"""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Physically delete pastes past their expiration. Returns count."""
        pass

    @abstractmethod
    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Physically delete every paste of an owner. Returns count."""
        pass

    @abstractmethod
    async def count_by_owner(self, owner_id: UUID) -> int:
        """Count non-deleted pastes of an owner"""
        pass
