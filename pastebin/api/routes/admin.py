from uuid import UUID

from fastapi import APIRouter, Depends

from pastebin.api.error import ClientError, http_error
from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.app.use_cases.admin import (
    AdminStatusResponse,
    DeleteUserResponse,
    DeleteUserUseCase,
    ManageAdminsUseCase,
    UserListResponse,
    UserStatsResponse,
    UserStatsUseCase,
)
from pastebin.app.use_cases.auth import UserInfo
from pastebin.depends import get_admin_user, get_unit_of_work
from pastebin.libs.result import Error

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/users", response_model=UserListResponse)
async def list_users(
    admin: UserInfo = Depends(get_admin_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UserStatsUseCase(uow).list_users()
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.get("/users/{user_id}/stats", response_model=UserStatsResponse)
async def user_stats(
    user_id: UUID,
    admin: UserInfo = Depends(get_admin_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UserStatsUseCase(uow).user_stats(user_id)
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.post("/users/{user_id}/promote", response_model=AdminStatusResponse)
async def promote_user(
    user_id: UUID,
    admin: UserInfo = Depends(get_admin_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: User does not exist
        - 409 Conflict: User is already an admin
    """
    result = await ManageAdminsUseCase(uow).promote(user_id)
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.post("/users/{user_id}/demote", response_model=AdminStatusResponse)
async def demote_user(
    user_id: UUID,
    admin: UserInfo = Depends(get_admin_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: User is not an admin
    """
    result = await ManageAdminsUseCase(uow).demote(user_id)
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.delete("/users/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    admin: UserInfo = Depends(get_admin_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a user together with their sessions, API keys and pastes.

    Raises:
        - 400 Bad Request: Admin tried to delete their own account
        - 404 Not Found: User does not exist
    """
    if str(user_id) == admin.id:
        raise ClientError(
            Error(errors.CANNOT_DELETE_SELF, "Cannot delete your own account")
        )

    result = await DeleteUserUseCase(uow).execute(user_id)
    if result.is_err():
        raise http_error(result.error)
    return result.value
