from datetime import timedelta
from unittest.mock import patch
from uuid import uuid4

import pytest

from pastebin.app import errors
from pastebin.app.use_cases.api_keys import (
    CreateApiKeyUseCase,
    ManageApiKeysUseCase,
    ValidateApiKeyUseCase,
)
from pastebin.domain.base import utcnow
from pastebin.domain.entities import ApiKey


def _api_key(user_id, expires_at=None):
    return ApiKey(
        id=uuid4(),
        key="pb_" + "a" * 64,
        name="ci",
        user_id=user_id,
        expires_at=expires_at,
        created_at=utcnow(),
    )


@pytest.mark.asyncio
async def test_create_api_key(mock_uow, make_user):
    """New key is pb_ followed by 64 hex characters"""
    # Arrange
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    # Act
    result = await CreateApiKeyUseCase(mock_uow).execute(user.id, "  deploy bot  ")

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.name == "deploy bot"
    assert data.key.startswith("pb_")
    assert len(data.key) == 3 + 64
    int(data.key[3:], 16)
    assert data.expires_at is None

    created = mock_uow.api_keys.create.call_args.args[0]
    assert created.user_id == user.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_api_key_with_expiration(mock_uow, make_user):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    now = utcnow()

    with patch(
        "pastebin.app.use_cases.api_keys.create_api_key_use_case.utcnow", return_value=now
    ):
        result = await CreateApiKeyUseCase(mock_uow).execute(user.id, "ci", 30)

    assert result.value.expires_at == now + timedelta(days=30)


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", "n" * 101])
async def test_create_api_key_invalid_name(mock_uow, name):
    result = await CreateApiKeyUseCase(mock_uow).execute(uuid4(), name)

    assert result.is_err()
    assert result.error.code == errors.API_KEY_NAME_REQUIRED


@pytest.mark.asyncio
async def test_create_api_key_negative_expiration(mock_uow):
    result = await CreateApiKeyUseCase(mock_uow).execute(uuid4(), "ci", -1)

    assert result.is_err()
    assert result.error.code == errors.INVALID_EXPIRATION


@pytest.mark.asyncio
@pytest.mark.parametrize("days", [10**7, 10**12])
async def test_create_api_key_expiration_out_of_range(mock_uow, make_user, days):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await CreateApiKeyUseCase(mock_uow).execute(user.id, "ci", days)

    assert result.is_err()
    assert result.error.code == errors.INVALID_EXPIRATION
    mock_uow.api_keys.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_api_key_unknown_user(mock_uow):
    result = await CreateApiKeyUseCase(mock_uow).execute(uuid4(), "ci")

    assert result.is_err()
    assert result.error.code == errors.USER_NOT_FOUND


@pytest.mark.asyncio
async def test_validate_api_key(mock_uow, make_user):
    """A valid key resolves to its user and stamps last_used_at"""
    user = make_user()
    api_key = _api_key(user.id)
    mock_uow.api_keys.get_by_key.return_value = api_key
    mock_uow.users.get_by_id.return_value = user

    result = await ValidateApiKeyUseCase(mock_uow).execute(api_key.key)

    assert result.is_ok()
    assert result.value.id == str(user.id)
    assert api_key.last_used_at is not None
    mock_uow.api_keys.update.assert_called_once_with(api_key)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_validate_unknown_api_key(mock_uow):
    result = await ValidateApiKeyUseCase(mock_uow).execute("pb_unknown")

    assert result.is_err()
    assert result.error.code == errors.INVALID_API_KEY


@pytest.mark.asyncio
async def test_validate_expired_api_key(mock_uow, make_user):
    user = make_user()
    mock_uow.api_keys.get_by_key.return_value = _api_key(
        user.id, expires_at=utcnow() - timedelta(days=1)
    )
    mock_uow.users.get_by_id.return_value = user

    result = await ValidateApiKeyUseCase(mock_uow).execute("pb_" + "a" * 64)

    assert result.is_err()
    assert result.error.code == errors.INVALID_API_KEY
    mock_uow.api_keys.update.assert_not_called()


@pytest.mark.asyncio
async def test_list_api_keys_shows_preview_only(mock_uow):
    user_id = uuid4()
    mock_uow.api_keys.list_by_user_id.return_value = [_api_key(user_id)]

    result = await ManageApiKeysUseCase(mock_uow).list_owned(user_id)

    assert result.is_ok()
    info = result.value.api_keys[0]
    assert info.key_preview == "pb_aaaaaaa..."
    assert not hasattr(info, "key")


@pytest.mark.asyncio
async def test_delete_own_api_key(mock_uow):
    key_id, user_id = uuid4(), uuid4()
    mock_uow.api_keys.delete_owned.return_value = True

    result = await ManageApiKeysUseCase(mock_uow).delete(key_id, user_id)

    assert result.is_ok()
    assert result.value.id == str(key_id)
    mock_uow.api_keys.delete_owned.assert_called_once_with(key_id, user_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_foreign_api_key(mock_uow):
    mock_uow.api_keys.delete_owned.return_value = False

    result = await ManageApiKeysUseCase(mock_uow).delete(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == errors.API_KEY_NOT_FOUND
    mock_uow.commit.assert_not_called()
