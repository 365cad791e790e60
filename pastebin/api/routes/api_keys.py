from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from pastebin.api.error import http_error
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.app.use_cases.api_keys import (
    ApiKeyListResponse,
    CreateApiKeyResponse,
    CreateApiKeyUseCase,
    DeleteApiKeyResponse,
    ManageApiKeysUseCase,
)
from pastebin.app.use_cases.auth import UserInfo
from pastebin.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/api/keys", tags=["API Keys"])


class CreateApiKeyRequest(BaseModel):
    name: str = Field(..., description="Label for the key")
    expires_in_days: Optional[int] = Field(
        default=None, description="Days until expiration, null or 0 = never"
    )


@router.get("", response_model=ApiKeyListResponse)
async def list_api_keys(
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageApiKeysUseCase(uow).list_owned(UUID(user.id))
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateApiKeyResponse)
async def create_api_key(
    request: CreateApiKeyRequest,
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue a new API key. The full key is only shown in this response.

    Raises:
        - 400 Bad Request: Missing name or negative expiration
    """
    result = await CreateApiKeyUseCase(uow).execute(
        UUID(user.id), request.name, request.expires_in_days
    )
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.delete("/{key_id}", response_model=DeleteApiKeyResponse)
async def delete_api_key(
    key_id: UUID,
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Key missing or owned by someone else
    """
    result = await ManageApiKeysUseCase(uow).delete(key_id, UUID(user.id))
    if result.is_err():
        raise http_error(result.error)
    return result.value
