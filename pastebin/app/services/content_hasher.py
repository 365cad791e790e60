"""
Content fingerprinting for paste deduplication.

The digest is only a dedup key; it is not used to detect tampering.
"""

import hashlib
from typing import BinaryIO, Union

CHUNK_SIZE = 64 * 1024


def compute_content_hash(data: Union[bytes, str, BinaryIO]) -> str:
    """
    Compute the SHA-256 hex digest of paste content.

    Args:
        data: Raw bytes, text (hashed as UTF-8) or a readable binary stream

    Returns:
        64-character lowercase hex digest

    For seekable streams the read position is restored afterwards.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return hashlib.sha256(data).hexdigest()

    start = None
    if _is_seekable(data):
        start = data.tell()

    digest = hashlib.sha256()
    for chunk in iter(lambda: data.read(CHUNK_SIZE), b""):
        digest.update(chunk)

    if start is not None:
        data.seek(start)

    return digest.hexdigest()


def _is_seekable(stream) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None:
        return False
    try:
        return bool(seekable())
    except (OSError, ValueError):
        return False
