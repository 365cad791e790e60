"""
Session Use Case

Cookie session lifecycle: create, look up, delete and expire.
"""

import secrets
from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.domain.entities import SESSION_LIFETIME, Session
from pastebin.libs.result import Error, Result, Return
from .dtos import DeleteSessionResponse, ExpireSessionsResponse, SessionInfo


def new_session(user_id: UUID) -> Session:
    """Build a fresh 30-day session with a 256-bit URL-safe token"""
    now = utcnow()
    return Session(
        id=secrets.token_urlsafe(32),
        user_id=user_id,
        created_at=now,
        expires_at=now + SESSION_LIFETIME,
    )


class SessionUseCase:
    """
    Use case for session management.

    Business Rules:
    - Sessions are valid for 30 days and never renewed
    - Creating a session leaves the user's other sessions untouched
    - Expiry is checked on every lookup, not only by the sweep
    - Deleting an unknown session is not an error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(self, user_id: UUID) -> Result[SessionInfo]:
        """
        Errors:
            - USER_NOT_FOUND: No such user
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            session = await self.uow.sessions.create(new_session(user.id))
            response = SessionInfo.from_entities(session, user)

            await self.uow.commit()

            return Return.ok(response)

    async def get(self, session_id: str) -> Result[SessionInfo]:
        """
        Errors:
            - INVALID_SESSION: Missing, expired or orphaned session
        """
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or session.is_expired(utcnow()):
                return Return.err(_invalid_session())

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                return Return.err(_invalid_session())

            return Return.ok(SessionInfo.from_entities(session, user))

    async def delete(self, session_id: str) -> Result[DeleteSessionResponse]:
        async with self.uow:
            deleted = await self.uow.sessions.delete_by_id(session_id)
            await self.uow.commit()
            return Return.ok(DeleteSessionResponse(deleted=deleted))

    async def expire_sweep(self) -> Result[ExpireSessionsResponse]:
        async with self.uow:
            removed = await self.uow.sessions.delete_expired(utcnow())
            await self.uow.commit()
            return Return.ok(ExpireSessionsResponse(removed=removed))


def _invalid_session() -> Error:
    return Error(errors.INVALID_SESSION, "Invalid or expired session")
