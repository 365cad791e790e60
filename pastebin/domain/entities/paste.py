"""
Paste Entity

A stored piece of text reachable through its short random ID.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from pastebin.domain.base import generate_paste_id, utcnow

MAX_CONTENT_BYTES = 10 * 1024 * 1024
DEFAULT_LANGUAGE = "text"


class Paste(SQLModel, table=True):
    """
    Paste entity.

    Business Rules:
    - content_hash always matches the current content
    - is_private implies owner_id is set (checked at creation)
    - expires_at None means the paste never expires
    - deleted_at marks a soft delete; expired rows are purged by the sweep
    """

    __tablename__ = "pastes"

    id: str = Field(default_factory=generate_paste_id, primary_key=True, max_length=16)
    title: str = Field(default="", max_length=255)
    content: str = Field(sa_column=Column(Text, nullable=False))
    content_hash: str = Field(index=True, max_length=64)
    language: str = Field(default=DEFAULT_LANGUAGE, max_length=50)

    is_private: bool = Field(default=False)
    unlisted: bool = Field(default=False, index=True)

    owner_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, index=True))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, index=True))

    __table_args__ = (Index("idx_paste_owner_hash", "owner_id", "content_hash"),)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at < now

    def is_owned_by(self, user_id: Optional[UUID]) -> bool:
        return user_id is not None and self.owner_id is not None and self.owner_id == user_id
