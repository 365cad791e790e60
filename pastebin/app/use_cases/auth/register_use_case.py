import bcrypt
from sqlalchemy.exc import IntegrityError

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.entities import User
from pastebin.domain.entities.user import (
    PASSWORD_MAX_BYTES,
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)
from pastebin.libs.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo
from .session_use_case import new_session

BCRYPT_ROUNDS = 12


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate username length (3-50) and password length (6+, max 72 bytes)
    2. Reject an already registered username
    3. Hash password with bcrypt cost factor 12
    4. Create User and a first 30-day Session
    5. Commit and return the user with the session token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, password: str) -> Result[AuthResponse]:
        """
        Errors:
            - INVALID_USERNAME: Username length out of range
            - PASSWORD_TOO_SHORT / PASSWORD_TOO_LONG: Password length out of range
            - USERNAME_TAKEN: Username already registered
        """
        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            return Return.err(
                Error(
                    errors.INVALID_USERNAME,
                    f"Username must be between {USERNAME_MIN_LENGTH} and "
                    f"{USERNAME_MAX_LENGTH} characters",
                )
            )

        if len(password) < PASSWORD_MIN_LENGTH:
            return Return.err(
                Error(
                    errors.PASSWORD_TOO_SHORT,
                    f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                )
            )

        password_bytes = password.encode("utf-8")
        if len(password_bytes) > PASSWORD_MAX_BYTES:
            return Return.err(
                Error(
                    errors.PASSWORD_TOO_LONG,
                    f"Password must be at most {PASSWORD_MAX_BYTES} bytes",
                )
            )

        async with self.uow:
            existing_user = await self.uow.users.get_by_username(username)
            if existing_user:
                return Return.err(_username_taken())

            password_hash = bcrypt.hashpw(password_bytes, bcrypt.gensalt(BCRYPT_ROUNDS))

            try:
                user = await self.uow.users.create(
                    User(username=username, password_hash=password_hash.decode("utf-8"))
                )
            except IntegrityError:
                # Lost a race against a concurrent registration
                await self.uow.rollback()
                return Return.err(_username_taken())

            session = await self.uow.sessions.create(new_session(user.id))

            response = AuthResponse(
                user=UserInfo.from_entity(user),
                session_id=session.id,
                expires_at=session.expires_at,
            )

            await self.uow.commit()

            return Return.ok(response)


def _username_taken() -> Error:
    return Error(errors.USERNAME_TAKEN, "Username already exists")
