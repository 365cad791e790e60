"""
User Entity

Registered account that can own pastes, sessions and API keys.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from pastebin.domain.base import utcnow

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72  # bcrypt ignores/refuses anything longer


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Username must be unique, 3 to 50 characters
    - Password stored as bcrypt hash, plaintext never persisted
    - Only removed through the admin cascading delete
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=USERNAME_MAX_LENGTH)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
