"""
Error taxonomy for use case error codes.

Use cases return Error(code, message); the API layer looks the code up here
to pick the HTTP status. Anything unclassified is an internal error.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    validation = "validation"
    conflict = "conflict"
    not_found = "not_found"
    permission = "permission"
    auth = "auth"


# Validation
CONTENT_EMPTY = "CONTENT_EMPTY"
CONTENT_TOO_LARGE = "CONTENT_TOO_LARGE"
PRIVATE_REQUIRES_OWNER = "PRIVATE_REQUIRES_OWNER"
INVALID_EXPIRATION = "INVALID_EXPIRATION"
INVALID_USERNAME = "INVALID_USERNAME"
PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
PASSWORD_TOO_LONG = "PASSWORD_TOO_LONG"
API_KEY_NAME_REQUIRED = "API_KEY_NAME_REQUIRED"
SEARCH_QUERY_REQUIRED = "SEARCH_QUERY_REQUIRED"
NOT_ADMIN = "NOT_ADMIN"
CANNOT_DELETE_SELF = "CANNOT_DELETE_SELF"
INVALID_UTF8 = "INVALID_UTF8"
INVALID_REQUEST = "INVALID_REQUEST"

# Conflict
USERNAME_TAKEN = "USERNAME_TAKEN"
ALREADY_ADMIN = "ALREADY_ADMIN"

# Not found
PASTE_NOT_FOUND = "PASTE_NOT_FOUND"
USER_NOT_FOUND = "USER_NOT_FOUND"
API_KEY_NOT_FOUND = "API_KEY_NOT_FOUND"

# Permission
NOT_PASTE_OWNER = "NOT_PASTE_OWNER"
ADMIN_REQUIRED = "ADMIN_REQUIRED"

# Auth
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
INVALID_SESSION = "INVALID_SESSION"
INVALID_API_KEY = "INVALID_API_KEY"
AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"


ERROR_CATEGORIES = {
    CONTENT_EMPTY: ErrorCategory.validation,
    CONTENT_TOO_LARGE: ErrorCategory.validation,
    PRIVATE_REQUIRES_OWNER: ErrorCategory.validation,
    INVALID_EXPIRATION: ErrorCategory.validation,
    INVALID_USERNAME: ErrorCategory.validation,
    PASSWORD_TOO_SHORT: ErrorCategory.validation,
    PASSWORD_TOO_LONG: ErrorCategory.validation,
    API_KEY_NAME_REQUIRED: ErrorCategory.validation,
    SEARCH_QUERY_REQUIRED: ErrorCategory.validation,
    NOT_ADMIN: ErrorCategory.validation,
    CANNOT_DELETE_SELF: ErrorCategory.validation,
    INVALID_UTF8: ErrorCategory.validation,
    INVALID_REQUEST: ErrorCategory.validation,
    USERNAME_TAKEN: ErrorCategory.conflict,
    ALREADY_ADMIN: ErrorCategory.conflict,
    PASTE_NOT_FOUND: ErrorCategory.not_found,
    USER_NOT_FOUND: ErrorCategory.not_found,
    API_KEY_NOT_FOUND: ErrorCategory.not_found,
    NOT_PASTE_OWNER: ErrorCategory.permission,
    ADMIN_REQUIRED: ErrorCategory.permission,
    INVALID_CREDENTIALS: ErrorCategory.auth,
    INVALID_SESSION: ErrorCategory.auth,
    INVALID_API_KEY: ErrorCategory.auth,
    AUTHENTICATION_REQUIRED: ErrorCategory.auth,
}


def category_of(code: str) -> Optional[ErrorCategory]:
    return ERROR_CATEGORIES.get(code)
