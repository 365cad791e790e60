"""
Use Cases

Organized by domain folder:
- auth/: Registration, login, sessions
- pastes/: Paste storage with dedup and access control
- api_keys/: Programmatic credentials
- admin/: Privileged user management
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    SessionUseCase,
)
from .pastes import (
    CreatePasteUseCase,
    GetPasteUseCase,
    UpdatePasteUseCase,
    DeletePasteUseCase,
    ListPastesUseCase,
    CanEditPasteUseCase,
    ExpirePastesUseCase,
)
from .api_keys import (
    CreateApiKeyUseCase,
    ValidateApiKeyUseCase,
    ManageApiKeysUseCase,
)
from .admin import (
    ManageAdminsUseCase,
    DeleteUserUseCase,
    UserStatsUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "SessionUseCase",
    # Pastes
    "CreatePasteUseCase",
    "GetPasteUseCase",
    "UpdatePasteUseCase",
    "DeletePasteUseCase",
    "ListPastesUseCase",
    "CanEditPasteUseCase",
    "ExpirePastesUseCase",
    # API keys
    "CreateApiKeyUseCase",
    "ValidateApiKeyUseCase",
    "ManageApiKeysUseCase",
    # Admin
    "ManageAdminsUseCase",
    "DeleteUserUseCase",
    "UserStatsUseCase",
]
