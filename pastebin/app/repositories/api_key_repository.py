from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from pastebin.domain.entities import ApiKey


class IApiKeyRepository(ABC):
    """ApiKey repository interface - application layer"""

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[ApiKey]:
        """Get API key by its token value"""
        pass

    @abstractmethod
    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new API key"""
        pass

    @abstractmethod
    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing API key"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[ApiKey]:
        """API keys of a user, newest first"""
        pass

    @abstractmethod
    async def delete_owned(self, key_id: UUID, user_id: UUID) -> bool:
        """Delete a key only if it belongs to user_id. Returns True if removed."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all keys of a user. Returns count."""
        pass

    @abstractmethod
    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count keys of a user"""
        pass
