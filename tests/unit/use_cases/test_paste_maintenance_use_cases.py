from uuid import uuid4

import pytest

from pastebin.app.use_cases.pastes import CanEditPasteUseCase, ExpirePastesUseCase


@pytest.mark.asyncio
async def test_can_edit_own_paste(mock_uow, make_paste):
    owner_id = uuid4()
    mock_uow.pastes.get_by_id.return_value = make_paste(owner_id=owner_id)

    assert await CanEditPasteUseCase(mock_uow).execute("AbCd1234", owner_id) is True


@pytest.mark.asyncio
async def test_cannot_edit_other_users_paste(mock_uow, make_paste):
    mock_uow.pastes.get_by_id.return_value = make_paste(owner_id=uuid4())

    assert await CanEditPasteUseCase(mock_uow).execute("AbCd1234", uuid4()) is False


@pytest.mark.asyncio
async def test_anonymous_can_never_edit(mock_uow, make_paste):
    mock_uow.pastes.get_by_id.return_value = make_paste(owner_id=None)

    assert await CanEditPasteUseCase(mock_uow).execute("AbCd1234", None) is False
    mock_uow.pastes.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_cannot_edit_missing_paste(mock_uow):
    assert await CanEditPasteUseCase(mock_uow).execute("missing1", uuid4()) is False


@pytest.mark.asyncio
async def test_expire_pastes_reports_removed(mock_uow):
    mock_uow.pastes.delete_expired.return_value = 3

    result = await ExpirePastesUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.removed == 3
    mock_uow.pastes.delete_expired.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_expire_pastes_nothing_to_do(mock_uow):
    mock_uow.pastes.delete_expired.return_value = 0

    result = await ExpirePastesUseCase(mock_uow).execute()

    assert result.value.removed == 0
