"""
API Key Use Cases

Issuing, validating, listing and revoking API keys.
"""

from .create_api_key_use_case import CreateApiKeyUseCase
from .validate_api_key_use_case import ValidateApiKeyUseCase
from .manage_api_keys_use_case import ManageApiKeysUseCase
from .dtos import (
    ApiKeyInfo,
    CreateApiKeyResponse,
    ApiKeyListResponse,
    DeleteApiKeyResponse,
)

__all__ = [
    "CreateApiKeyUseCase",
    "ValidateApiKeyUseCase",
    "ManageApiKeysUseCase",
    "ApiKeyInfo",
    "CreateApiKeyResponse",
    "ApiKeyListResponse",
    "DeleteApiKeyResponse",
]
