"""
Validate API Key Use Case

Bearer credential check used on every request that carries an API key.
"""

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.app.use_cases.auth.dtos import UserInfo
from pastebin.domain.base import utcnow
from pastebin.libs.result import Error, Result, Return


class ValidateApiKeyUseCase:
    """
    Business Rules:
    - Unknown and expired keys fail with the same INVALID_API_KEY
    - Success stamps last_used_at and returns the key's user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[UserInfo]:
        async with self.uow:
            now = utcnow()
            api_key = await self.uow.api_keys.get_by_key(token)
            if api_key is None or api_key.is_expired(now):
                return Return.err(_invalid_api_key())

            user = await self.uow.users.get_by_id(api_key.user_id)
            if user is None:
                return Return.err(_invalid_api_key())

            api_key.last_used_at = now
            await self.uow.api_keys.update(api_key)
            response = UserInfo.from_entity(user)

            await self.uow.commit()

            return Return.ok(response)


def _invalid_api_key() -> Error:
    return Error(errors.INVALID_API_KEY, "Invalid or expired API key")
