"""
User Stats Use Case

Read-only views for the admin panel.
"""

from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.libs.result import Error, Result, Return
from .dtos import UserListResponse, UserStatsResponse, UserSummary


class UserStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_users(self) -> Result[UserListResponse]:
        """All users, newest first, with their admin flag"""
        async with self.uow:
            users = await self.uow.users.list_all()
            admin_ids = await self.uow.admins.list_user_ids()

            return Return.ok(
                UserListResponse(
                    users=[
                        UserSummary(
                            id=str(u.id),
                            username=u.username,
                            created_at=u.created_at,
                            is_admin=u.id in admin_ids,
                        )
                        for u in users
                    ]
                )
            )

    async def user_stats(self, user_id: UUID) -> Result[UserStatsResponse]:
        """
        Errors:
            - USER_NOT_FOUND: No such user
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            return Return.ok(
                UserStatsResponse(
                    user_id=str(user.id),
                    username=user.username,
                    created_at=user.created_at,
                    paste_count=await self.uow.pastes.count_by_owner(user_id),
                    session_count=await self.uow.sessions.count_by_user_id(user_id),
                    api_key_count=await self.uow.api_keys.count_by_user_id(user_id),
                    is_admin=await self.uow.admins.get_by_user_id(user_id) is not None,
                )
            )
