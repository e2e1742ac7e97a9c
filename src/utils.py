"""Codec and URL helpers shared by the workflows."""

import base64
import binascii
import re

IMAGE_URL_PATTERN = re.compile(r"\.(jpeg|jpg|gif|png)$")


def encode_bytes(data: bytes) -> str:
    """Base64-encode raw bytes."""
    return base64.b64encode(data).decode("ascii")


def decode_bytes(data: str) -> bytes:
    """Decode a base64 string back to raw bytes.

    Raises ``ValueError`` if ``data`` is not valid base64.
    """
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 data: {e}") from e


def encode(text: str) -> str:
    """Obscure code content for storage. This is not encryption."""
    return encode_bytes(text.encode("utf-8"))


def decode(text: str) -> str:
    """Recover code content stored with :func:`encode`."""
    return decode_bytes(text).decode("utf-8")


def is_image(url: str) -> bool:
    """Check whether a URL points at a permitted image type by its suffix."""
    return IMAGE_URL_PATTERN.search(url) is not None
