from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from pastebin.app.services.content_hasher import compute_content_hash
from pastebin.domain.base import utcnow
from pastebin.domain.entities import Paste, User


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository's methods awaitable"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = AsyncMock()
    uow.sessions = AsyncMock()
    uow.pastes = AsyncMock()
    uow.api_keys = AsyncMock()
    uow.admins = AsyncMock()

    # create/update hand back the entity they were given
    for repo in (uow.users, uow.sessions, uow.pastes, uow.api_keys, uow.admins):
        repo.create.side_effect = lambda entity: entity
        repo.update.side_effect = lambda entity: entity

    # Lookups miss unless a test says otherwise
    uow.users.get_by_id.return_value = None
    uow.users.get_by_username.return_value = None
    uow.sessions.get_by_id.return_value = None
    uow.pastes.get_by_id.return_value = None
    uow.pastes.find_by_content_hash.return_value = None
    uow.api_keys.get_by_key.return_value = None
    uow.admins.get_by_user_id.return_value = None

    return uow


@pytest.fixture
def make_user():
    def _make(username="alice", password_hash="$2b$12$notarealhash"):
        return User(id=uuid4(), username=username, password_hash=password_hash)

    return _make


@pytest.fixture
def make_paste():
    def _make(content="hello world", owner_id=None, **fields):
        now = utcnow()
        return Paste(
            id=fields.pop("id", "AbCd1234"),
            content=content,
            content_hash=compute_content_hash(content),
            owner_id=owner_id,
            created_at=fields.pop("created_at", now - timedelta(minutes=5)),
            updated_at=fields.pop("updated_at", now - timedelta(minutes=5)),
            **fields,
        )

    return _make
