from datetime import timedelta

import pytest
import pytest_asyncio

from pastebin.adapter.repositories.paste_repository import PasteRepository
from pastebin.adapter.repositories.user_repository import UserRepository
from pastebin.app.services.content_hasher import compute_content_hash
from pastebin.domain.base import utcnow
from pastebin.domain.entities import Paste, User


@pytest_asyncio.fixture
async def owners(db_session):
    users = UserRepository(db_session)
    alice = await users.create(User(username="alice", password_hash="x"))
    bob = await users.create(User(username="bob", password_hash="x"))
    await db_session.commit()
    return alice, bob


@pytest.fixture
def pastes(db_session):
    return PasteRepository(db_session)


async def _add(pastes: PasteRepository, content: str, **fields) -> Paste:
    now = utcnow()
    return await pastes.create(
        Paste(
            content=content,
            content_hash=compute_content_hash(content),
            created_at=fields.pop("created_at", now),
            updated_at=now,
            **fields,
        )
    )


@pytest.mark.asyncio
async def test_find_by_content_hash_is_owner_scoped(pastes, owners):
    alice, bob = owners
    digest = compute_content_hash("dup")
    anonymous = await _add(pastes, "dup")
    alices = await _add(pastes, "dup", owner_id=alice.id)

    now = utcnow()
    assert (await pastes.find_by_content_hash(digest, None, now)).id == anonymous.id
    assert (await pastes.find_by_content_hash(digest, alice.id, now)).id == alices.id
    assert await pastes.find_by_content_hash(digest, bob.id, now) is None


@pytest.mark.asyncio
async def test_find_by_content_hash_skips_dead_pastes(pastes):
    now = utcnow()
    await _add(pastes, "gone", deleted_at=now)
    await _add(pastes, "stale", expires_at=now - timedelta(minutes=1))

    assert await pastes.find_by_content_hash(compute_content_hash("gone"), None, now) is None
    assert await pastes.find_by_content_hash(compute_content_hash("stale"), None, now) is None


@pytest.mark.asyncio
async def test_get_by_id_hides_soft_deleted(pastes):
    paste = await _add(pastes, "tombstoned", deleted_at=utcnow())

    assert await pastes.get_by_id(paste.id) is None


@pytest.mark.asyncio
async def test_list_public_filters_and_orders(pastes, owners):
    alice, _ = owners
    now = utcnow()
    older = await _add(pastes, "older", created_at=now - timedelta(hours=1))
    newer = await _add(pastes, "newer", created_at=now)
    await _add(pastes, "private", owner_id=alice.id, is_private=True)
    await _add(pastes, "unlisted", unlisted=True)
    await _add(pastes, "expired", expires_at=now - timedelta(seconds=1))
    await _add(pastes, "deleted", deleted_at=now)

    listed = await pastes.list_public(now)

    assert [p.id for p in listed] == [newer.id, older.id]


@pytest.mark.asyncio
async def test_search_escapes_like_wildcards(pastes, owners):
    alice, _ = owners
    literal = await _add(pastes, "progress: 100%", owner_id=alice.id)
    await _add(pastes, "progress: 1000", owner_id=alice.id)

    found = await pastes.search_by_owner(alice.id, "100%", utcnow())

    assert [p.id for p in found] == [literal.id]


@pytest.mark.asyncio
async def test_delete_expired_is_idempotent(pastes, db_session):
    now = utcnow()
    await _add(pastes, "expired one", expires_at=now - timedelta(minutes=5))
    await _add(pastes, "expired two", expires_at=now - timedelta(minutes=1), deleted_at=now)
    keeper = await _add(pastes, "still valid", expires_at=now + timedelta(minutes=5))
    forever = await _add(pastes, "never expires")
    await db_session.commit()

    assert await pastes.delete_expired(now) == 2
    assert await pastes.delete_expired(now) == 0

    assert await pastes.get_by_id(keeper.id) is not None
    assert await pastes.get_by_id(forever.id) is not None


@pytest.mark.asyncio
async def test_delete_and_count_by_owner(pastes, owners):
    alice, bob = owners
    await _add(pastes, "a1", owner_id=alice.id)
    await _add(pastes, "a2", owner_id=alice.id)
    await _add(pastes, "a3", owner_id=alice.id, deleted_at=utcnow())
    await _add(pastes, "b1", owner_id=bob.id)

    assert await pastes.count_by_owner(alice.id) == 2
    assert await pastes.delete_by_owner(alice.id) == 3
    assert await pastes.count_by_owner(alice.id) == 0
    assert await pastes.count_by_owner(bob.id) == 1
