"""
Expire Pastes Use Case

Physically purges pastes whose expiration instant has passed.
"""

from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.libs.result import Result, Return
from .dtos import ExpirePastesResponse


class ExpirePastesUseCase:
    """
    Idempotent: a second run with nothing newly expired removes zero rows.
    Soft-deleted pastes are purged too once they expire.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ExpirePastesResponse]:
        async with self.uow:
            removed = await self.uow.pastes.delete_expired(utcnow())
            await self.uow.commit()
            return Return.ok(ExpirePastesResponse(removed=removed))
