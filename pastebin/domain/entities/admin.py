"""
Admin Marker Entity

Presence of a row grants administrative privileges to the user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from pastebin.domain.base import utcnow


class AdminMarker(SQLModel, table=True):
    __tablename__ = "admins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", unique=True, nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
