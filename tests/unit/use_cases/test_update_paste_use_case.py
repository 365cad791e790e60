from datetime import timedelta
from uuid import uuid4

import pytest

from pastebin.app import errors
from pastebin.app.services.content_hasher import compute_content_hash
from pastebin.app.use_cases.pastes import UpdatePasteCommand, UpdatePasteUseCase
from pastebin.domain.base import utcnow


@pytest.mark.asyncio
async def test_owner_updates_paste(mock_uow, make_paste):
    """Owner edit replaces content and recomputes the fingerprint"""
    # Arrange
    owner_id = uuid4()
    paste = make_paste(content="old", owner_id=owner_id, is_private=True)
    original_created_at = paste.created_at
    mock_uow.pastes.get_by_id.return_value = paste

    command = UpdatePasteCommand(
        paste_id=paste.id,
        title="renamed",
        content="new content",
        language="python",
        unlisted=True,
        owner_id=owner_id,
    )

    # Act
    result = await UpdatePasteUseCase(mock_uow).execute(command)

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.title == "renamed"
    assert data.content == "new content"
    assert data.content_hash == compute_content_hash("new content")
    assert data.language == "python"
    assert data.unlisted is True
    # Privacy cannot be changed by an edit
    assert data.is_private is True
    assert data.created_at == original_created_at
    assert data.updated_at > original_created_at

    mock_uow.pastes.update.assert_called_once_with(paste)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_by_non_owner(mock_uow, make_paste):
    mock_uow.pastes.get_by_id.return_value = make_paste(owner_id=uuid4())

    result = await UpdatePasteUseCase(mock_uow).execute(
        UpdatePasteCommand(paste_id="AbCd1234", content="hijack", owner_id=uuid4())
    )

    assert result.is_err()
    assert result.error.code == errors.NOT_PASTE_OWNER
    mock_uow.pastes.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_anonymous_paste_is_forbidden(mock_uow, make_paste):
    """Nobody owns an anonymous paste, so nobody can edit it"""
    mock_uow.pastes.get_by_id.return_value = make_paste(owner_id=None)

    result = await UpdatePasteUseCase(mock_uow).execute(
        UpdatePasteCommand(paste_id="AbCd1234", content="edit", owner_id=uuid4())
    )

    assert result.is_err()
    assert result.error.code == errors.NOT_PASTE_OWNER


@pytest.mark.asyncio
async def test_update_missing_paste(mock_uow):
    result = await UpdatePasteUseCase(mock_uow).execute(
        UpdatePasteCommand(paste_id="missing1", content="edit", owner_id=uuid4())
    )

    assert result.is_err()
    assert result.error.code == errors.PASTE_NOT_FOUND


@pytest.mark.asyncio
async def test_update_expired_paste(mock_uow, make_paste):
    owner_id = uuid4()
    mock_uow.pastes.get_by_id.return_value = make_paste(
        owner_id=owner_id, expires_at=utcnow() - timedelta(minutes=1)
    )

    result = await UpdatePasteUseCase(mock_uow).execute(
        UpdatePasteCommand(paste_id="AbCd1234", content="edit", owner_id=owner_id)
    )

    assert result.is_err()
    assert result.error.code == errors.PASTE_NOT_FOUND


@pytest.mark.asyncio
async def test_update_with_empty_content(mock_uow):
    result = await UpdatePasteUseCase(mock_uow).execute(
        UpdatePasteCommand(paste_id="AbCd1234", content="", owner_id=uuid4())
    )

    assert result.is_err()
    assert result.error.code == errors.CONTENT_EMPTY
    mock_uow.pastes.get_by_id.assert_not_called()
