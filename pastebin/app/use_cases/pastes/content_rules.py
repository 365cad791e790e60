from typing import Optional

from pastebin.app import errors
from pastebin.domain.entities import MAX_CONTENT_BYTES
from pastebin.libs.result import Error


def check_content(content: str) -> Optional[Error]:
    """Return an Error if content is empty or larger than 10 MiB of UTF-8"""
    size = len(content.encode("utf-8"))
    if size == 0:
        return Error(errors.CONTENT_EMPTY, "Paste content cannot be empty")
    if size > MAX_CONTENT_BYTES:
        return Error(
            errors.CONTENT_TOO_LARGE,
            "Paste too large (max 10MB)",
            reason=f"{size} bytes exceeds limit of {MAX_CONTENT_BYTES}",
        )
    return None
