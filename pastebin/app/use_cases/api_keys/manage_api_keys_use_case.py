"""
Manage API Keys Use Case

Listing and revocation of a user's own keys.
"""

from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.libs.result import Error, Result, Return
from .dtos import ApiKeyInfo, ApiKeyListResponse, DeleteApiKeyResponse


class ManageApiKeysUseCase:
    """
    Business Rules:
    - Users only see and revoke their own keys
    - Revoking someone else's key looks exactly like revoking a missing one
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_owned(self, user_id: UUID) -> Result[ApiKeyListResponse]:
        async with self.uow:
            keys = await self.uow.api_keys.list_by_user_id(user_id)
            return Return.ok(
                ApiKeyListResponse(api_keys=[ApiKeyInfo.from_entity(k) for k in keys])
            )

    async def delete(self, key_id: UUID, user_id: UUID) -> Result[DeleteApiKeyResponse]:
        """
        Errors:
            - API_KEY_NOT_FOUND: Key missing or owned by another user
        """
        async with self.uow:
            deleted = await self.uow.api_keys.delete_owned(key_id, user_id)
            if not deleted:
                return Return.err(Error(errors.API_KEY_NOT_FOUND, "API key not found"))

            await self.uow.commit()

            return Return.ok(DeleteApiKeyResponse(id=str(key_id), deleted=True))
