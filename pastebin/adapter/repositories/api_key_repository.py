from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from pastebin.app.repositories.api_key_repository import IApiKeyRepository
from pastebin.domain.entities import ApiKey


class ApiKeyRepository(IApiKeyRepository):
    """ApiKey repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_key(self, key: str) -> Optional[ApiKey]:
        """Get API key by its token value"""
        stmt = select(ApiKey).where(ApiKey.key == key)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new API key"""
        self.session.add(api_key)
        await self.session.flush()
        await self.session.refresh(api_key)
        return api_key

    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing API key"""
        self.session.add(api_key)
        await self.session.flush()
        await self.session.refresh(api_key)
        return api_key

    async def list_by_user_id(self, user_id: UUID) -> List[ApiKey]:
        """API keys of a user, newest first"""
        stmt = (
            select(ApiKey)
            .where(ApiKey.user_id == user_id)
            .order_by(ApiKey.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_owned(self, key_id: UUID, user_id: UUID) -> bool:
        """Delete a key only if it belongs to user_id"""
        stmt = delete(ApiKey).where(ApiKey.id == key_id, ApiKey.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all keys of a user"""
        stmt = delete(ApiKey).where(ApiKey.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count keys of a user"""
        stmt = select(func.count()).select_from(ApiKey).where(ApiKey.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one()
