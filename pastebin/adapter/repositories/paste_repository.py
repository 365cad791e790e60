from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from pastebin.app.repositories.paste_repository import IPasteRepository
from pastebin.domain.entities import Paste


def _live(now: datetime):
    """Filter clauses for pastes that are neither soft-deleted nor expired"""
    return (
        Paste.deleted_at.is_(None),
        or_(Paste.expires_at.is_(None), Paste.expires_at >= now),
    )


class PasteRepository(IPasteRepository):
    """Paste repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, paste_id: str) -> Optional[Paste]:
        """Get a paste that has not been soft-deleted"""
        stmt = select(Paste).where(Paste.id == paste_id, Paste.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_content_hash(
        self, content_hash: str, owner_id: Optional[UUID], now: datetime
    ) -> Optional[Paste]:
        """Find a live paste with this fingerprint in the given owner scope"""
        if owner_id is None:
            scope = Paste.owner_id.is_(None)
        else:
            scope = Paste.owner_id == owner_id

        stmt = (
            select(Paste)
            .where(Paste.content_hash == content_hash, scope, *_live(now))
            .order_by(Paste.created_at)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, paste: Paste) -> Paste:
        """Create a new paste"""
        self.session.add(paste)
        await self.session.flush()
        await self.session.refresh(paste)
        return paste

    async def update(self, paste: Paste) -> Paste:
        """Update existing paste"""
        self.session.add(paste)
        await self.session.flush()
        await self.session.refresh(paste)
        return paste

    async def list_by_owner(self, owner_id: UUID, now: datetime) -> List[Paste]:
        """Live pastes of an owner, newest first"""
        stmt = (
            select(Paste)
            .where(Paste.owner_id == owner_id, *_live(now))
            .order_by(Paste.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_public(self, now: datetime) -> List[Paste]:
        """Live pastes that are neither private nor unlisted, newest first"""
        stmt = (
            select(Paste)
            .where(Paste.is_private == False, Paste.unlisted == False, *_live(now))
            .order_by(Paste.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def search_by_owner(
        self, owner_id: UUID, query: str, now: datetime
    ) -> List[Paste]:
        """
        Substring match on title or content among an owner's live pastes.

        LIKE wildcards in the query are escaped so they match literally.
        """
        stmt = (
            select(Paste)
            .where(
                Paste.owner_id == owner_id,
                or_(
                    Paste.title.contains(query, autoescape=True),
                    Paste.content.contains(query, autoescape=True),
                ),
                *_live(now),
            )
            .order_by(Paste.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_expired(self, now: datetime) -> int:
        """Physically delete pastes past their expiration"""
        stmt = delete(Paste).where(Paste.expires_at.is_not(None), Paste.expires_at < now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Physically delete every paste of an owner"""
        stmt = delete(Paste).where(Paste.owner_id == owner_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count_by_owner(self, owner_id: UUID) -> int:
        """Count non-deleted pastes of an owner"""
        stmt = (
            select(func.count())
            .select_from(Paste)
            .where(Paste.owner_id == owner_id, Paste.deleted_at.is_(None))
        )
        result = await self.session.exec(stmt)
        return result.one()
