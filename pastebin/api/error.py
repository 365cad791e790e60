from fastapi import status

from pastebin.app.errors import ErrorCategory, category_of
from pastebin.libs.result import Error

CATEGORY_STATUS = {
    ErrorCategory.validation: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.conflict: status.HTTP_409_CONFLICT,
    ErrorCategory.not_found: status.HTTP_404_NOT_FOUND,
    ErrorCategory.permission: status.HTTP_403_FORBIDDEN,
    ErrorCategory.auth: status.HTTP_401_UNAUTHORIZED,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def http_error(error: Error) -> Exception:
    """ClientError with the status of the error's category, else ServerError"""
    category = category_of(error.code)
    if category is None:
        return ServerError(error)
    return ClientError(error, status_code=CATEGORY_STATUS[category])
