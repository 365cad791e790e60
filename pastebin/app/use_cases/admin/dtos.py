"""
Admin Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel


class AdminStatusResponse(BaseModel):
    user_id: str
    is_admin: bool


class DeleteUserResponse(BaseModel):
    """Counts of rows removed by the cascading delete"""

    user_id: str
    sessions_deleted: int
    api_keys_deleted: int
    pastes_deleted: int
    admin_revoked: bool


class UserSummary(BaseModel):
    id: str
    username: str
    created_at: datetime
    is_admin: bool


class UserListResponse(BaseModel):
    users: List[UserSummary]


class UserStatsResponse(BaseModel):
    user_id: str
    username: str
    created_at: datetime
    paste_count: int
    session_count: int
    api_key_count: int
    is_admin: bool
