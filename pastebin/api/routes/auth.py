from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Cookie, Depends, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from pastebin.api.error import http_error
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.app.use_cases.admin import ManageAdminsUseCase
from pastebin.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    RegisterUseCase,
    SessionUseCase,
    UserInfo,
)
from pastebin.depends import get_optional_user, get_unit_of_work
from pastebin.domain.entities import SESSION_LIFETIME

router = APIRouter(prefix="/api", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Length rules are enforced by the use case so errors carry stable codes.
    """

    username: str = Field(..., description="Username (3-50 chars)")
    password: str = Field(..., description="Password (min 6 chars)")


class LoginRequest(BaseModel):
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class LogoutResponse(BaseModel):
    success: bool


class MeResponse(BaseModel):
    authenticated: bool
    user: Optional[UserInfo] = None
    is_admin: bool = False


def _set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=int(SESSION_LIFETIME.total_seconds()),
        path="/",
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a new account and log it in.

    Raises:
        - 400 Bad Request: Username or password length out of range
        - 409 Conflict: Username already exists
    """
    result = await RegisterUseCase(uow).execute(request.username, request.password)
    if result.is_err():
        raise http_error(result.error)

    _set_session_cookie(response, result.value.session_id)
    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 401 Unauthorized: Invalid username or password
    """
    result = await LoginUseCase(uow).execute(request.username, request.password)
    if result.is_err():
        raise http_error(result.error)

    _set_session_cookie(response, result.value.session_id)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    response: Response,
    session: Optional[str] = Cookie(default=None, alias=ApplicationConfig.SESSION_COOKIE_NAME),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete the current session (if any) and clear the cookie"""
    if session:
        result = await SessionUseCase(uow).delete(session)
        if result.is_err():
            raise http_error(result.error)

    response.delete_cookie(key=ApplicationConfig.SESSION_COOKIE_NAME, path="/")
    return LogoutResponse(success=True)


@router.get("/me", response_model=MeResponse)
async def me(
    user: Optional[UserInfo] = Depends(get_optional_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    if user is None:
        return MeResponse(authenticated=False)

    is_admin = await ManageAdminsUseCase(uow).is_admin(UUID(user.id))
    return MeResponse(authenticated=True, user=user, is_admin=is_admin)
