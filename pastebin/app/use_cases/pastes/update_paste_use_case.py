"""
Update Paste Use Case

Owner-only edit of title, content, language and unlisted flag.
"""

from pastebin.app import errors
from pastebin.app.services.content_hasher import compute_content_hash
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import utcnow
from pastebin.domain.entities.paste import DEFAULT_LANGUAGE
from pastebin.libs.result import Error, Result, Return
from .content_rules import check_content
from .dtos import PasteResponse, UpdatePasteCommand


class UpdatePasteUseCase:
    """
    Use case for editing a paste.

    Business Rules:
    - Only the owner may edit; anonymous pastes cannot be edited
    - The fingerprint is recomputed from the new content
    - is_private and expires_at are never changed here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdatePasteCommand) -> Result[PasteResponse]:
        """
        Errors:
            - CONTENT_EMPTY / CONTENT_TOO_LARGE: New content out of range
            - PASTE_NOT_FOUND: Missing, deleted or expired paste
            - NOT_PASTE_OWNER: Caller does not own the paste
        """
        content_error = check_content(command.content)
        if content_error:
            return Return.err(content_error)

        async with self.uow:
            now = utcnow()
            paste = await self.uow.pastes.get_by_id(command.paste_id)
            if paste is None or paste.is_expired(now):
                return Return.err(Error(errors.PASTE_NOT_FOUND, "Paste not found"))

            if not paste.is_owned_by(command.owner_id):
                return Return.err(
                    Error(errors.NOT_PASTE_OWNER, "You can only edit your own pastes")
                )

            paste.title = command.title or ""
            paste.content = command.content
            paste.content_hash = compute_content_hash(command.content)
            paste.language = command.language or DEFAULT_LANGUAGE
            paste.unlisted = command.unlisted
            paste.updated_at = now

            paste = await self.uow.pastes.update(paste)
            response = PasteResponse.from_entity(paste)

            await self.uow.commit()

            return Return.ok(response)
