"""
Use Case: Delete User

Cascading removal of a user and everything they own.
"""

from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.libs.result import Error, Result, Return
from .dtos import DeleteUserResponse


class DeleteUserUseCase:
    """
    Delete a user with all dependent rows.

    Business Logic:
    1. Validate the user exists
    2. Delete all sessions of the user
    3. Delete all API keys of the user
    4. Delete all pastes of the user (physically, not tombstoned)
    5. Remove the admin marker if present
    6. Delete the user record
    7. Commit once; any failing step rolls back the whole cascade
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[DeleteUserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            sessions_deleted = await self.uow.sessions.delete_by_user_id(user_id)
            api_keys_deleted = await self.uow.api_keys.delete_by_user_id(user_id)
            pastes_deleted = await self.uow.pastes.delete_by_owner(user_id)
            admin_revoked = await self.uow.admins.delete_by_user_id(user_id)
            await self.uow.users.delete(user)

            await self.uow.commit()

            return Return.ok(
                DeleteUserResponse(
                    user_id=str(user_id),
                    sessions_deleted=sessions_deleted,
                    api_keys_deleted=api_keys_deleted,
                    pastes_deleted=pastes_deleted,
                    admin_revoked=admin_revoked,
                )
            )
