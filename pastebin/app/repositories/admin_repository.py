from abc import ABC, abstractmethod
from typing import Optional, Set
from uuid import UUID

from pastebin.domain.entities import AdminMarker


class IAdminRepository(ABC):
    """Admin marker repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[AdminMarker]:
        """Get the admin marker of a user, if any"""
        pass

    @abstractmethod
    async def create(self, marker: AdminMarker) -> AdminMarker:
        """Grant admin to a user"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> bool:
        """Revoke admin. Returns True if a marker existed."""
        pass

    @abstractmethod
    async def list_user_ids(self) -> Set[UUID]:
        """IDs of every admin user"""
        pass
