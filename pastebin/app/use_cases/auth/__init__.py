"""
Authentication Use Cases

Registration, login and session lifecycle.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .session_use_case import SessionUseCase
from .dtos import (
    UserInfo,
    SessionInfo,
    AuthResponse,
    DeleteSessionResponse,
    ExpireSessionsResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "SessionUseCase",
    # DTOs - Responses
    "AuthResponse",
    "SessionInfo",
    "DeleteSessionResponse",
    "ExpireSessionsResponse",
    # DTOs - Nested Models
    "UserInfo",
]
