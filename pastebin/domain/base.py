import secrets
import string
from datetime import UTC, datetime

PASTE_ID_LENGTH = 8
PASTE_ID_ALPHABET = string.ascii_letters + string.digits


def generate_paste_id(length: int = PASTE_ID_LENGTH) -> str:
    return "".join(secrets.choice(PASTE_ID_ALPHABET) for _ in range(length))


def utcnow() -> datetime:
    # Naive UTC: SQLite DateTime columns drop tzinfo on the way back.
    return datetime.now(UTC).replace(tzinfo=None)
