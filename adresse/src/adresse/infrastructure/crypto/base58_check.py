"""
Base-58 check codec.

Thin layer over the ``base58`` package. Checksums are the first 4 bytes of
double-SHA-256 over the data they protect.
"""

from typing import Optional

import base58

from adresse.domain.exceptions import (
    ChecksumMismatchError,
    InvalidAddressError,
    InvalidBase58Error,
)
from adresse.infrastructure.crypto.hash_utils import double_sha256

CHECKSUM_LENGTH = 4


def checksum(data: bytes) -> bytes:
    """Return the 4-byte checksum of ``data``."""
    return double_sha256(data)[:CHECKSUM_LENGTH]


def encode(data: bytes) -> str:
    """Base-58 encode ``data`` as is (caller supplies any checksum)."""
    return base58.b58encode(bytes(data)).decode("ascii")


def encode_checked(data: bytes) -> str:
    """Append the checksum to ``data`` and base-58 encode the result."""
    data = bytes(data)
    return encode(data + checksum(data))


def decode(text: str) -> bytes:
    """
    Decode base-58 text.

    Raises:
        InvalidBase58Error: Empty text, surrounding whitespace or
            characters outside the alphabet
    """
    if not text:
        raise InvalidBase58Error("empty text")

    if text != text.strip():
        raise InvalidBase58Error("surrounding whitespace")

    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise InvalidBase58Error(str(e)) from e


def decode_checked_strict(text: str) -> bytes:
    """
    Decode base-58 text and verify its trailing checksum.

    Returns:
        Decoded bytes without the checksum

    Raises:
        InvalidBase58Error: Text is not base-58
        ChecksumMismatchError: Checksum missing or wrong
    """
    raw = decode(text)
    if len(raw) < CHECKSUM_LENGTH:
        raise ChecksumMismatchError()

    data, found = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    expected = checksum(data)
    if found != expected:
        raise ChecksumMismatchError(expected=expected, actual=found)

    return data


def decode_checked(text: str) -> Optional[bytes]:
    """Like decode_checked_strict(), but returns None on failure."""
    try:
        return decode_checked_strict(text)
    except InvalidAddressError:
        return None
