"""Codec and URL helper tests."""

import os

import pytest

from src.utils import decode, decode_bytes, encode, encode_bytes, is_image


@pytest.mark.parametrize(
    "text",
    ["", "print(1)", "def f():\n    return 'ünïcødé' + \"✓\"\n", "a" * 10_000],
)
def test_text_round_trip(text):
    """Test encoded text decodes to the original."""
    assert decode(encode(text)) == text
    assert encode(decode(encode(text))) == encode(text)


def test_bytes_round_trip():
    """Test arbitrary bytes survive the codec in both directions."""
    for data in [b"", bytes(range(256)), os.urandom(1024)]:
        assert decode_bytes(encode_bytes(data)) == data
        assert encode_bytes(decode_bytes(encode_bytes(data))) == encode_bytes(data)


def test_encode_is_base64():
    """Test the encoded form is plain base64."""
    assert encode("print(1)") == "cHJpbnQoMSk="


def test_decode_invalid_base64():
    """Test malformed input raises ValueError."""
    with pytest.raises(ValueError):
        decode_bytes("not base64!")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.com/a.png", True),
        ("https://example.com/a.jpg", True),
        ("https://example.com/a.jpeg", True),
        ("https://example.com/a.gif", True),
        ("https://example.com/a.svg", False),
        ("https://example.com/a.png?size=2", False),
        ("https://example.com/png", False),
    ],
)
def test_is_image(url, expected):
    """Test image URLs are recognized by suffix."""
    assert is_image(url) is expected
