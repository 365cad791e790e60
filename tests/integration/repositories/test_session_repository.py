from datetime import timedelta

import pytest

from pastebin.adapter.repositories.session_repository import SessionRepository
from pastebin.adapter.repositories.user_repository import UserRepository
from pastebin.domain.base import utcnow
from pastebin.domain.entities import Session, User


@pytest.mark.asyncio
async def test_session_lifecycle(db_session):
    user = await UserRepository(db_session).create(User(username="alice", password_hash="x"))
    sessions = SessionRepository(db_session)
    now = utcnow()

    await sessions.create(
        Session(id="live", user_id=user.id, created_at=now, expires_at=now + timedelta(days=1))
    )
    await sessions.create(
        Session(id="dead", user_id=user.id, created_at=now, expires_at=now - timedelta(seconds=1))
    )

    assert await sessions.count_by_user_id(user.id) == 2
    assert await sessions.delete_expired(now) == 1
    assert await sessions.delete_expired(now) == 0
    assert await sessions.get_by_id("dead") is None
    assert (await sessions.get_by_id("live")).user_id == user.id

    assert await sessions.delete_by_id("live") is True
    assert await sessions.delete_by_id("live") is False
    assert await sessions.count_by_user_id(user.id) == 0
