"""
Session Entity

Browser login session referenced by the session cookie.
"""

from datetime import datetime, timedelta
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from pastebin.domain.base import utcnow

SESSION_LIFETIME = timedelta(days=30)


class Session(SQLModel, table=True):
    """
    Session entity - the primary key is the opaque cookie token.

    Business Rules:
    - Token is 256 random bits, URL-safe encoded
    - Valid for 30 days from creation, never renewed
    - A user may hold any number of concurrent sessions
    """

    __tablename__ = "sessions"

    id: str = Field(primary_key=True, max_length=64)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
