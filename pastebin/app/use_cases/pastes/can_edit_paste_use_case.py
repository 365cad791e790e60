from typing import Optional
from uuid import UUID

from pastebin.app.services.unit_of_work import UnitOfWork


class CanEditPasteUseCase:
    """True iff the paste exists and belongs to user_id"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, paste_id: str, user_id: Optional[UUID]) -> bool:
        if user_id is None:
            return False

        async with self.uow:
            paste = await self.uow.pastes.get_by_id(paste_id)
            return paste is not None and paste.is_owned_by(user_id)
