from typing import Optional
from uuid import UUID

from fastapi import Cookie, Depends, Header, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from pastebin.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from pastebin.api.error import ClientError
from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.app.use_cases.admin import ManageAdminsUseCase
from pastebin.app.use_cases.api_keys import ValidateApiKeyUseCase
from pastebin.app.use_cases.auth import SessionUseCase, UserInfo
from pastebin.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Accept "Bearer <key>" or a bare key"""
    if not authorization:
        return None
    token = authorization.strip()
    if token.lower().startswith("bearer "):
        token = token[len("bearer "):].strip()
    return token or None


async def get_optional_user(
    authorization: Optional[str] = Header(default=None),
    session: Optional[str] = Cookie(default=None, alias=ApplicationConfig.SESSION_COOKIE_NAME),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Optional[UserInfo]:
    """
    Resolve the caller's identity.

    An API key in the Authorization header is tried first, then the
    session cookie. A bad credential degrades to anonymous, it never fails
    the request by itself.

    Returns:
        UserInfo of the authenticated user, or None for anonymous callers
    """
    token = _bearer_token(authorization)
    if token:
        result = await ValidateApiKeyUseCase(uow).execute(token)
        if result.is_ok():
            return result.value

    if session:
        result = await SessionUseCase(uow).get(session)
        if result.is_ok():
            return result.value.user

    return None


async def get_current_user(
    user: Optional[UserInfo] = Depends(get_optional_user),
) -> UserInfo:
    """
    Dependency for endpoints that require a logged-in user.

    Raises:
        ClientError: 401 if no valid API key or session was supplied
    """
    if user is None:
        raise ClientError(
            Error(errors.AUTHENTICATION_REQUIRED, "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return user


async def get_admin_user(
    user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> UserInfo:
    """
    Raises:
        ClientError: 403 if the caller is not an admin
    """
    if not await ManageAdminsUseCase(uow).is_admin(UUID(user.id)):
        raise ClientError(
            Error(errors.ADMIN_REQUIRED, "Admin privileges required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return user
