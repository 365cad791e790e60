import hashlib
import io

from pastebin.app.services.content_hasher import CHUNK_SIZE, compute_content_hash


def test_text_is_hashed_as_utf8():
    assert compute_content_hash("héllo") == hashlib.sha256("héllo".encode("utf-8")).hexdigest()


def test_bytes_and_text_agree():
    assert compute_content_hash(b"abc") == compute_content_hash("abc")


def test_digest_is_64_hex_chars():
    digest = compute_content_hash("anything")
    assert len(digest) == 64
    assert digest == digest.lower()
    int(digest, 16)


def test_identical_content_same_hash():
    assert compute_content_hash("same text") == compute_content_hash("same text")
    assert compute_content_hash("same text") != compute_content_hash("same text ")


def test_stream_matches_bytes_across_chunks():
    payload = b"x" * (CHUNK_SIZE * 2 + 17)
    stream = io.BytesIO(payload)

    assert compute_content_hash(stream) == compute_content_hash(payload)


def test_seekable_stream_position_restored():
    stream = io.BytesIO(b"header:body")
    stream.seek(7)

    digest = compute_content_hash(stream)

    assert digest == compute_content_hash(b"body")
    assert stream.tell() == 7


def test_empty_stream():
    assert compute_content_hash(io.BytesIO(b"")) == hashlib.sha256(b"").hexdigest()
