"""
API Key Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from pastebin.domain.entities import ApiKey

KEY_PREVIEW_LENGTH = 10


class ApiKeyInfo(BaseModel):
    """Listed API key; only a short preview of the token is exposed"""

    id: str
    name: str
    key_preview: str
    expires_at: Optional[datetime]
    last_used_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_entity(cls, api_key: ApiKey) -> "ApiKeyInfo":
        return cls(
            id=str(api_key.id),
            name=api_key.name,
            key_preview=api_key.key[:KEY_PREVIEW_LENGTH] + "...",
            expires_at=api_key.expires_at,
            last_used_at=api_key.last_used_at,
            created_at=api_key.created_at,
        )


class CreateApiKeyResponse(BaseModel):
    """The only response that carries the full key"""

    id: str
    name: str
    key: str
    expires_at: Optional[datetime]
    created_at: datetime


class ApiKeyListResponse(BaseModel):
    api_keys: List[ApiKeyInfo]


class DeleteApiKeyResponse(BaseModel):
    id: str
    deleted: bool
