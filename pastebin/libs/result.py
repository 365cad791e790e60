"""
Result type shared by all use cases.

Use cases never raise for business failures; they return
``Return.ok(value)`` or ``Return.err(Error(code, message))`` and let the
API layer decide how to render the error.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Error:
    """Business error with a stable machine-readable code"""

    def __init__(self, code: str, message: str, reason: Optional[str] = None):
        self.code = code
        self.message = message
        self.reason = reason

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self.code, self.message, self.reason) == (
            other.code,
            other.message,
            other.reason,
        )


class Result(Generic[T]):
    """Either a value or an Error, never both"""

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result.err({self.error!r})"
        return f"Result.ok({self.value!r})"


class Return:
    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
