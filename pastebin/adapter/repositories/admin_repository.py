from typing import Optional, Set
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from pastebin.app.repositories.admin_repository import IAdminRepository
from pastebin.domain.entities import AdminMarker


class AdminRepository(IAdminRepository):
    """Admin marker repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[AdminMarker]:
        """Get the admin marker of a user, if any"""
        stmt = select(AdminMarker).where(AdminMarker.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, marker: AdminMarker) -> AdminMarker:
        """Grant admin to a user"""
        self.session.add(marker)
        await self.session.flush()
        await self.session.refresh(marker)
        return marker

    async def delete_by_user_id(self, user_id: UUID) -> bool:
        """Revoke admin"""
        stmt = delete(AdminMarker).where(AdminMarker.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def list_user_ids(self) -> Set[UUID]:
        """IDs of every admin user"""
        stmt = select(AdminMarker.user_id)
        result = await self.session.exec(stmt)
        return set(result.all())
