"""
Create API Key Use Case
"""

import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.domain.entities import API_KEY_PREFIX, ApiKey
from pastebin.libs.result import Error, Result, Return
from .dtos import CreateApiKeyResponse

API_KEY_NAME_MAX_LENGTH = 100


class CreateApiKeyUseCase:
    """
    Use case for issuing an API key.

    Business Rules:
    - Key is "pb_" + 32 random bytes in hex
    - A name is required
    - expires_in_days None or 0 means the key never expires
    - Users may hold any number of keys
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, name: str, expires_in_days: Optional[int] = None
    ) -> Result[CreateApiKeyResponse]:
        """
        Errors:
            - API_KEY_NAME_REQUIRED: Blank or over-long name
            - INVALID_EXPIRATION: Negative or out-of-range expiration
            - USER_NOT_FOUND: No such user
        """
        name = (name or "").strip()
        if not name or len(name) > API_KEY_NAME_MAX_LENGTH:
            return Return.err(
                Error(
                    errors.API_KEY_NAME_REQUIRED,
                    f"Name is required (max {API_KEY_NAME_MAX_LENGTH} characters)",
                )
            )

        if expires_in_days is not None and expires_in_days < 0:
            return Return.err(
                Error(errors.INVALID_EXPIRATION, "Expiration cannot be negative")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            now = utcnow()
            expires_at = None
            if expires_in_days:
                try:
                    expires_at = now + timedelta(days=expires_in_days)
                except OverflowError:
                    return Return.err(
                        Error(errors.INVALID_EXPIRATION, "Expiration is too far in the future")
                    )

            api_key = await self.uow.api_keys.create(
                ApiKey(
                    key=API_KEY_PREFIX + secrets.token_hex(32),
                    name=name,
                    user_id=user_id,
                    expires_at=expires_at,
                    created_at=now,
                )
            )
            response = CreateApiKeyResponse(
                id=str(api_key.id),
                name=api_key.name,
                key=api_key.key,
                expires_at=api_key.expires_at,
                created_at=api_key.created_at,
            )

            await self.uow.commit()

            return Return.ok(response)
