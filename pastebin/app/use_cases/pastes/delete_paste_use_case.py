"""
Delete Paste Use Case

Owner-only soft delete.
"""

from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.libs.result import Error, Result, Return
from .dtos import DeletePasteResponse


class DeletePasteUseCase:
    """
    Use case for deleting a paste.

    Business Rules:
    - Only the owner may delete
    - The row is tombstoned (deleted_at), reads treat it as absent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, paste_id: str, owner_id: UUID) -> Result[DeletePasteResponse]:
        async with self.uow:
            paste = await self.uow.pastes.get_by_id(paste_id)
            if paste is None:
                return Return.err(Error(errors.PASTE_NOT_FOUND, "Paste not found"))

            if not paste.is_owned_by(owner_id):
                return Return.err(
                    Error(errors.NOT_PASTE_OWNER, "You can only delete your own pastes")
                )

            paste.deleted_at = utcnow()
            await self.uow.pastes.update(paste)

            await self.uow.commit()

            return Return.ok(DeletePasteResponse(id=paste_id, deleted=True))
