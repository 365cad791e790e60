from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from pastebin.app.repositories.session_repository import ISessionRepository
from pastebin.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: str) -> Optional[Session]:
        """Get session by its token"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def delete_by_id(self, session_id: str) -> bool:
        """Delete a session by token"""
        stmt = delete(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions of a user"""
        stmt = delete(Session).where(Session.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions past their expiration"""
        stmt = delete(Session).where(Session.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count sessions of a user"""
        stmt = select(func.count()).select_from(Session).where(Session.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one()
