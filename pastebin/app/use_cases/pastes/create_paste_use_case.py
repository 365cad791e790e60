"""
Create Paste Use Case

Stores a new paste, or returns the identical paste the same owner already has.
"""

from datetime import timedelta

from pastebin.app import errors
from pastebin.app.services.content_hasher import compute_content_hash
from pastebin.app.services.unit_of_work import UnitOfWork
from pastebin.domain.base import generate_paste_id, utcnow
from pastebin.domain.entities import Paste
from pastebin.domain.entities.paste import DEFAULT_LANGUAGE
from pastebin.libs.result import Error, Result, Return
from .content_rules import check_content
from .dtos import CreatePasteCommand, CreatePasteResponse, PasteResponse


class CreatePasteUseCase:
    """
    Use case for paste creation with per-owner deduplication.

    Business Rules:
    - Content must be 1 byte to 10 MiB
    - Anonymous users cannot create private pastes
    - Identical content in the same owner scope returns the existing paste
      (anonymous uploads never match a user's paste and vice versa)
    - expires_in_minutes None or 0 means the paste never expires
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreatePasteCommand) -> Result[CreatePasteResponse]:
        """
        Execute create paste use case.

        Args:
            command: CreatePasteCommand with content, flags and optional owner

        Returns:
            Result[CreatePasteResponse], created=False on a dedup hit

        Errors:
            - CONTENT_EMPTY / CONTENT_TOO_LARGE: Content size out of range
            - PRIVATE_REQUIRES_OWNER: Anonymous private paste
            - INVALID_EXPIRATION: Negative or out-of-range expiration
        """
        content_error = check_content(command.content)
        if content_error:
            return Return.err(content_error)

        if command.is_private and command.owner_id is None:
            return Return.err(
                Error(
                    errors.PRIVATE_REQUIRES_OWNER,
                    "Must be logged in to create private pastes",
                )
            )

        if command.expires_in_minutes is not None and command.expires_in_minutes < 0:
            return Return.err(
                Error(errors.INVALID_EXPIRATION, "Expiration cannot be negative")
            )

        content_hash = compute_content_hash(command.content)

        async with self.uow:
            now = utcnow()

            existing = await self.uow.pastes.find_by_content_hash(
                content_hash, command.owner_id, now
            )
            if existing is not None:
                return Return.ok(
                    CreatePasteResponse(
                        paste=PasteResponse.from_entity(existing), created=False
                    )
                )

            expires_at = None
            if command.expires_in_minutes:
                try:
                    expires_at = now + timedelta(minutes=command.expires_in_minutes)
                except OverflowError:
                    return Return.err(
                        Error(errors.INVALID_EXPIRATION, "Expiration is too far in the future")
                    )

            paste = Paste(
                id=generate_paste_id(),
                title=command.title or "",
                content=command.content,
                content_hash=content_hash,
                language=command.language or DEFAULT_LANGUAGE,
                is_private=command.is_private,
                unlisted=command.unlisted,
                owner_id=command.owner_id,
                expires_at=expires_at,
                created_at=now,
                updated_at=now,
            )
            paste = await self.uow.pastes.create(paste)
            response = CreatePasteResponse(
                paste=PasteResponse.from_entity(paste), created=True
            )

            await self.uow.commit()

            return Return.ok(response)
