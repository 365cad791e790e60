from uuid import uuid4

import pytest

from pastebin.app import errors
from pastebin.app.use_cases.pastes import DeletePasteUseCase


@pytest.mark.asyncio
async def test_owner_deletes_paste(mock_uow, make_paste):
    """Delete tombstones the row instead of removing it"""
    # Arrange
    owner_id = uuid4()
    paste = make_paste(owner_id=owner_id)
    mock_uow.pastes.get_by_id.return_value = paste

    # Act
    result = await DeletePasteUseCase(mock_uow).execute(paste.id, owner_id)

    # Assert
    assert result.is_ok()
    assert result.value.id == paste.id
    assert result.value.deleted is True
    assert paste.deleted_at is not None

    mock_uow.pastes.update.assert_called_once_with(paste)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_by_non_owner(mock_uow, make_paste):
    paste = make_paste(owner_id=uuid4())
    mock_uow.pastes.get_by_id.return_value = paste

    result = await DeletePasteUseCase(mock_uow).execute(paste.id, uuid4())

    assert result.is_err()
    assert result.error.code == errors.NOT_PASTE_OWNER
    assert paste.deleted_at is None
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_paste(mock_uow):
    result = await DeletePasteUseCase(mock_uow).execute("missing1", uuid4())

    assert result.is_err()
    assert result.error.code == errors.PASTE_NOT_FOUND
