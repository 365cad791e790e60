"""
Manage Admins Use Case

Grant, revoke and check the admin marker.
"""

from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.entities import AdminMarker
from pastebin.libs.result import Error, Result, Return
from .dtos import AdminStatusResponse


class ManageAdminsUseCase:
    """
    Business Rules:
    - Admin is a presence-only marker, there are no levels
    - Promoting requires an existing user who is not already admin
    - Demoting a non-admin fails
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def is_admin(self, user_id: UUID) -> bool:
        async with self.uow:
            marker = await self.uow.admins.get_by_user_id(user_id)
            return marker is not None

    async def promote(self, user_id: UUID) -> Result[AdminStatusResponse]:
        """
        Errors:
            - USER_NOT_FOUND: No such user
            - ALREADY_ADMIN: User already holds the marker
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            if await self.uow.admins.get_by_user_id(user_id) is not None:
                return Return.err(Error(errors.ALREADY_ADMIN, "User is already an admin"))

            await self.uow.admins.create(AdminMarker(user_id=user_id))

            await self.uow.commit()

            return Return.ok(AdminStatusResponse(user_id=str(user_id), is_admin=True))

    async def demote(self, user_id: UUID) -> Result[AdminStatusResponse]:
        """
        Errors:
            - NOT_ADMIN: User holds no admin marker
        """
        async with self.uow:
            removed = await self.uow.admins.delete_by_user_id(user_id)
            if not removed:
                return Return.err(Error(errors.NOT_ADMIN, "User is not an admin"))

            await self.uow.commit()

            return Return.ok(AdminStatusResponse(user_id=str(user_id), is_admin=False))
