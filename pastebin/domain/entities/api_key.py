"""
API Key Entity

Long-lived bearer credential for programmatic access.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from pastebin.domain.base import utcnow

API_KEY_PREFIX = "pb_"


class ApiKey(SQLModel, table=True):
    """
    ApiKey entity.

    Business Rules:
    - Key is "pb_" followed by 256 random bits in hex
    - expires_at None means the key never expires
    - last_used_at is refreshed on every successful validation
    """

    __tablename__ = "api_keys"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=80)
    name: str = Field(max_length=100)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, index=True))
    last_used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at < now
