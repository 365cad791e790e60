"""
Login Use Case

Verifies credentials and opens a new session.
"""

import bcrypt

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.entities.user import PASSWORD_MAX_BYTES
from pastebin.libs.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo
from .session_use_case import new_session

# Pre-computed hash so unknown usernames cost the same bcrypt check
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown username and wrong password yield the same INVALID_CREDENTIALS
    - A bcrypt check always runs, even if the user is not found
    - Every login creates a new session; existing sessions stay valid
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, password: str) -> Result[AuthResponse]:
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > PASSWORD_MAX_BYTES:
            return Return.err(_invalid_credentials())

        async with self.uow:
            user = await self.uow.users.get_by_username(username)

            if user is None:
                bcrypt.checkpw(password_bytes, _DUMMY_HASH)
                return Return.err(_invalid_credentials())

            if not bcrypt.checkpw(password_bytes, user.password_hash.encode("utf-8")):
                return Return.err(_invalid_credentials())

            session = await self.uow.sessions.create(new_session(user.id))

            response = AuthResponse(
                user=UserInfo.from_entity(user),
                session_id=session.id,
                expires_at=session.expires_at,
            )

            await self.uow.commit()

            return Return.ok(response)


def _invalid_credentials() -> Error:
    return Error(errors.INVALID_CREDENTIALS, "Invalid username or password")
