"""
Paste Use Cases

Creation with deduplication, access-controlled reads, owner edits,
listings and the expiration sweep.
"""

from .create_paste_use_case import CreatePasteUseCase
from .get_paste_use_case import GetPasteUseCase
from .update_paste_use_case import UpdatePasteUseCase
from .delete_paste_use_case import DeletePasteUseCase
from .list_pastes_use_case import ListPastesUseCase
from .can_edit_paste_use_case import CanEditPasteUseCase
from .expire_pastes_use_case import ExpirePastesUseCase
from .dtos import (
    CreatePasteCommand,
    UpdatePasteCommand,
    PasteResponse,
    PasteSummary,
    CreatePasteResponse,
    DeletePasteResponse,
    PasteListResponse,
    ExpirePastesResponse,
)

__all__ = [
    # Use Cases
    "CreatePasteUseCase",
    "GetPasteUseCase",
    "UpdatePasteUseCase",
    "DeletePasteUseCase",
    "ListPastesUseCase",
    "CanEditPasteUseCase",
    "ExpirePastesUseCase",
    # DTOs - Commands
    "CreatePasteCommand",
    "UpdatePasteCommand",
    # DTOs - Responses
    "PasteResponse",
    "PasteSummary",
    "CreatePasteResponse",
    "DeletePasteResponse",
    "PasteListResponse",
    "ExpirePastesResponse",
]
