"""
Admin Use Cases

Privileged operations: admin markers, cascading user deletion, user stats.
"""

from .manage_admins_use_case import ManageAdminsUseCase
from .delete_user_use_case import DeleteUserUseCase
from .user_stats_use_case import UserStatsUseCase
from .dtos import (
    AdminStatusResponse,
    DeleteUserResponse,
    UserSummary,
    UserListResponse,
    UserStatsResponse,
)

__all__ = [
    "ManageAdminsUseCase",
    "DeleteUserUseCase",
    "UserStatsUseCase",
    "AdminStatusResponse",
    "DeleteUserResponse",
    "UserSummary",
    "UserListResponse",
    "UserStatsResponse",
]
