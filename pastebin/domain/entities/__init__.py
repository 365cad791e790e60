"""
Pastebin Domain Entities

All persisted entities, one model per file.
"""

from .user import User
from .paste import Paste, MAX_CONTENT_BYTES
from .session import Session, SESSION_LIFETIME
from .api_key import ApiKey, API_KEY_PREFIX
from .admin import AdminMarker

__all__ = [
    "User",
    "Paste",
    "Session",
    "ApiKey",
    "AdminMarker",
    "MAX_CONTENT_BYTES",
    "SESSION_LIFETIME",
    "API_KEY_PREFIX",
]
