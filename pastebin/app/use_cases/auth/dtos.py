"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the auth domain.
"""

from datetime import datetime

from pydantic import BaseModel

from pastebin.domain.entities import Session, User


class UserInfo(BaseModel):
    """Public user information, never includes the password hash"""

    id: str
    username: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(id=str(user.id), username=user.username, created_at=user.created_at)


class SessionInfo(BaseModel):
    """A live session and the user it belongs to"""

    session_id: str
    user: UserInfo
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_entities(cls, session: Session, user: User) -> "SessionInfo":
        return cls(
            session_id=session.id,
            user=UserInfo.from_entity(user),
            created_at=session.created_at,
            expires_at=session.expires_at,
        )


class AuthResponse(BaseModel):
    """Response for register and login: the user plus a fresh session"""

    user: UserInfo
    session_id: str
    expires_at: datetime


class DeleteSessionResponse(BaseModel):
    deleted: bool


class ExpireSessionsResponse(BaseModel):
    removed: int
