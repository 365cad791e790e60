from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from config import ApplicationConfig
from pastebin.api.error import ClientError, http_error
from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.app.use_cases.auth import UserInfo
from pastebin.app.use_cases.pastes import (
    CanEditPasteUseCase,
    CreatePasteCommand,
    CreatePasteUseCase,
    DeletePasteResponse,
    DeletePasteUseCase,
    GetPasteUseCase,
    ListPastesUseCase,
    PasteListResponse,
    PasteResponse,
    UpdatePasteCommand,
    UpdatePasteUseCase,
)
from pastebin.depends import get_current_user, get_optional_user, get_unit_of_work
from pastebin.domain.entities.paste import DEFAULT_LANGUAGE
from pastebin.libs.result import Error

router = APIRouter(tags=["Pastes"])


class UploadRequest(BaseModel):
    """JSON upload payload. expires_in is in minutes, null or 0 = never."""

    title: str = ""
    content: str = ""
    language: str = DEFAULT_LANGUAGE
    is_private: bool = False
    unlisted: bool = False
    expires_in: Optional[int] = Field(default=None, description="Minutes until expiration")


class UploadResponse(BaseModel):
    id: str
    url: str
    created: bool


class UpdatePasteRequest(BaseModel):
    title: str = ""
    content: str
    language: str = DEFAULT_LANGUAGE
    unlisted: bool = False


class PasteView(PasteResponse):
    can_edit: bool


class CanEditResponse(BaseModel):
    can_edit: bool


def _paste_url(paste_id: str) -> str:
    return f"{ApplicationConfig.SERVE_PATH}{paste_id}"


def _user_uuid(user: Optional[UserInfo]) -> Optional[UUID]:
    return UUID(user.id) if user is not None else None


@router.post("/upload", status_code=status.HTTP_201_CREATED)
async def upload(
    request: Request,
    response: Response,
    language: Optional[str] = Query(default=None),
    private: bool = Query(default=False),
    unlisted: bool = Query(default=False),
    expires_in: Optional[int] = Query(default=None),
    user: Optional[UserInfo] = Depends(get_optional_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a paste.

    Accepts either a JSON UploadRequest (Content-Type: application/json) or
    a raw UTF-8 text body with options in the query string. JSON uploads
    get a JSON UploadResponse, raw uploads get the paste URL as plain text.
    Re-uploading identical content returns the existing paste with 200.

    Raises:
        - 400 Bad Request: Empty, oversized or non UTF-8 content,
          private paste without login
    """
    body = await request.body()
    is_json = request.headers.get("content-type", "").startswith("application/json")

    if is_json:
        try:
            payload = UploadRequest.model_validate_json(body or b"{}")
        except ValidationError:
            raise ClientError(Error(errors.INVALID_REQUEST, "Invalid request"))
        command = CreatePasteCommand(
            title=payload.title,
            content=payload.content,
            language=payload.language or DEFAULT_LANGUAGE,
            is_private=payload.is_private,
            unlisted=payload.unlisted,
            expires_in_minutes=payload.expires_in,
            owner_id=_user_uuid(user),
        )
    else:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            raise ClientError(Error(errors.INVALID_UTF8, "Invalid UTF-8 text"))
        command = CreatePasteCommand(
            content=text,
            language=language or DEFAULT_LANGUAGE,
            is_private=private,
            unlisted=unlisted,
            expires_in_minutes=expires_in,
            owner_id=_user_uuid(user),
        )

    result = await CreatePasteUseCase(uow).execute(command)
    if result.is_err():
        raise http_error(result.error)

    paste = result.value.paste
    created = result.value.created
    status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK

    if not is_json:
        return PlainTextResponse(_paste_url(paste.id), status_code=status_code)

    response.status_code = status_code
    return UploadResponse(id=paste.id, url=_paste_url(paste.id), created=created)


@router.get("/api/pastes", response_model=PasteListResponse)
async def list_public_pastes(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Public listing: never includes private or unlisted pastes"""
    result = await ListPastesUseCase(uow).list_public()
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.get("/api/my-pastes", response_model=PasteListResponse)
async def list_my_pastes(
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPastesUseCase(uow).list_owned(UUID(user.id))
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.get("/api/paste/search", response_model=PasteListResponse)
async def search_pastes(
    q: str = Query(default=""),
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: Empty query
    """
    result = await ListPastesUseCase(uow).search(UUID(user.id), q)
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.get("/api/paste/{paste_id}/can-edit", response_model=CanEditResponse)
async def can_edit_paste(
    paste_id: str,
    user: Optional[UserInfo] = Depends(get_optional_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    can_edit = await CanEditPasteUseCase(uow).execute(paste_id, _user_uuid(user))
    return CanEditResponse(can_edit=can_edit)


@router.put("/api/paste/{paste_id}", response_model=PasteResponse)
async def update_paste(
    paste_id: str,
    request: UpdatePasteRequest,
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: Empty or oversized content
        - 403 Forbidden: Not the owner
        - 404 Not Found: Paste missing, deleted or expired
    """
    command = UpdatePasteCommand(
        paste_id=paste_id,
        title=request.title,
        content=request.content,
        language=request.language,
        unlisted=request.unlisted,
        owner_id=UUID(user.id),
    )
    result = await UpdatePasteUseCase(uow).execute(command)
    if result.is_err():
        raise http_error(result.error)
    return result.value


@router.delete("/api/paste/{paste_id}", response_model=DeletePasteResponse)
async def delete_paste(
    paste_id: str,
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: Not the owner
        - 404 Not Found: Paste missing or already deleted
    """
    result = await DeletePasteUseCase(uow).execute(paste_id, UUID(user.id))
    if result.is_err():
        raise http_error(result.error)
    return result.value


def build_serve_router(serve_path: str) -> APIRouter:
    """
    Router serving pastes under the configured path (default /p/).

    ?raw=1 or Accept: text/plain returns the bare content.
    """
    serve_router = APIRouter(prefix=serve_path.rstrip("/"), tags=["Pastes"])

    @serve_router.get("/{paste_id}", response_model=PasteView)
    async def serve_paste(
        paste_id: str,
        request: Request,
        raw: Optional[str] = Query(default=None),
        user: Optional[UserInfo] = Depends(get_optional_user),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ):
        """
        Raises:
            - 404 Not Found: Missing, deleted, expired, or private and not ours
        """
        viewer_id = _user_uuid(user)
        result = await GetPasteUseCase(uow).execute(paste_id, viewer_id)
        if result.is_err():
            raise http_error(result.error)

        paste = result.value
        if raw == "1" or request.headers.get("accept", "").startswith("text/plain"):
            return PlainTextResponse(paste.content)

        can_edit = viewer_id is not None and paste.owner_id == str(viewer_id)
        return PasteView(**paste.model_dump(), can_edit=can_edit)

    return serve_router
