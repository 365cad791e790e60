"""
Paste Use Case DTOs (Data Transfer Objects)

Commands carry validated intent from the API layer into the use cases;
responses are built from entities while the unit of work is still open.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from pastebin.domain.entities import Paste
from pastebin.domain.entities.paste import DEFAULT_LANGUAGE


# ============================================================================
# Command DTOs
# ============================================================================


class CreatePasteCommand(BaseModel):
    """Create paste intent. owner_id None means an anonymous upload."""

    title: str = ""
    content: str
    language: str = DEFAULT_LANGUAGE
    is_private: bool = False
    unlisted: bool = False
    expires_in_minutes: Optional[int] = None
    owner_id: Optional[UUID] = None


class UpdatePasteCommand(BaseModel):
    """Update paste intent. Privacy and expiration cannot be changed."""

    paste_id: str
    title: str = ""
    content: str
    language: str = DEFAULT_LANGUAGE
    unlisted: bool = False
    owner_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class PasteResponse(BaseModel):
    """Full paste including content"""

    id: str
    title: str
    content: str
    content_hash: str
    language: str
    is_private: bool
    unlisted: bool
    owner_id: Optional[str]
    expires_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, paste: Paste) -> "PasteResponse":
        return cls(
            id=paste.id,
            title=paste.title,
            content=paste.content,
            content_hash=paste.content_hash,
            language=paste.language,
            is_private=paste.is_private,
            unlisted=paste.unlisted,
            owner_id=str(paste.owner_id) if paste.owner_id else None,
            expires_at=paste.expires_at,
            created_at=paste.created_at,
            updated_at=paste.updated_at,
        )


class PasteSummary(BaseModel):
    """Paste listing entry without content"""

    id: str
    title: str
    language: str
    is_private: bool
    unlisted: bool
    size: int
    expires_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_entity(cls, paste: Paste) -> "PasteSummary":
        return cls(
            id=paste.id,
            title=paste.title,
            language=paste.language,
            is_private=paste.is_private,
            unlisted=paste.unlisted,
            size=len(paste.content.encode("utf-8")),
            expires_at=paste.expires_at,
            created_at=paste.created_at,
        )


class CreatePasteResponse(BaseModel):
    """created is False when an identical paste in the same scope was returned"""

    paste: PasteResponse
    created: bool


class DeletePasteResponse(BaseModel):
    id: str
    deleted: bool


class PasteListResponse(BaseModel):
    pastes: List[PasteSummary]
    count: int


class ExpirePastesResponse(BaseModel):
    removed: int
