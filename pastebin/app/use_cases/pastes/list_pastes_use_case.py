"""
List Pastes Use Case

Owner listing, public listing and owner-scoped search.
"""

from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.libs.result import Error, Result, Return
from .dtos import PasteListResponse, PasteSummary


class ListPastesUseCase:
    """
    Use case for paste listings. All listings are newest first and skip
    deleted or expired pastes.

    Business Rules:
    - Owners see all their pastes, private ones included
    - The public listing never contains private or unlisted pastes
    - Search only covers the caller's own pastes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_owned(self, owner_id: UUID) -> Result[PasteListResponse]:
        async with self.uow:
            pastes = await self.uow.pastes.list_by_owner(owner_id, utcnow())
            return Return.ok(_to_list(pastes))

    async def list_public(self) -> Result[PasteListResponse]:
        async with self.uow:
            pastes = await self.uow.pastes.list_public(utcnow())
            return Return.ok(_to_list(pastes))

    async def search(self, owner_id: UUID, query: str) -> Result[PasteListResponse]:
        """
        Substring search over title and content.

        Errors:
            - SEARCH_QUERY_REQUIRED: Empty query
        """
        if not query:
            return Return.err(
                Error(errors.SEARCH_QUERY_REQUIRED, "Search query required")
            )

        async with self.uow:
            pastes = await self.uow.pastes.search_by_owner(owner_id, query, utcnow())
            return Return.ok(_to_list(pastes))


def _to_list(pastes) -> PasteListResponse:
    summaries = [PasteSummary.from_entity(p) for p in pastes]
    return PasteListResponse(pastes=summaries, count=len(summaries))
