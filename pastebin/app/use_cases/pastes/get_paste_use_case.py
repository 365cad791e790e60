"""
Get Paste Use Case

Reads a paste on behalf of an optional viewer.
"""

from typing import Optional
from uuid import UUID

from pastebin.app import errors
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.libs.result import Error, Result, Return
from .dtos import PasteResponse


class GetPasteUseCase:
    """
    Use case for reading a single paste.

    Business Rules:
    - Soft-deleted and expired pastes are not found (expiry is checked live,
      the sweep may not have run yet)
    - Private pastes are only visible to their owner; anyone else gets the
      same PASTE_NOT_FOUND as for a missing paste
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, paste_id: str, viewer_id: Optional[UUID] = None
    ) -> Result[PasteResponse]:
        async with self.uow:
            paste = await self.uow.pastes.get_by_id(paste_id)

            if paste is None or paste.is_expired(utcnow()):
                return Return.err(_not_found())

            if paste.is_private and not paste.is_owned_by(viewer_id):
                return Return.err(_not_found())

            return Return.ok(PasteResponse.from_entity(paste))


def _not_found() -> Error:
    return Error(errors.PASTE_NOT_FOUND, "Paste not found")
