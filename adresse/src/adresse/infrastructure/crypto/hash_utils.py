"""
Hash provider for address checksums and public key hashing.
"""

import hashlib
from typing import Optional

ADDRESS_HASH_LENGTH = 20


def sha256(data: bytes) -> bytes:
    """Single SHA-256 digest."""
    return hashlib.sha256(data).digest()


def double_sha256(data: bytes, offset: int = 0, length: Optional[int] = None) -> bytes:
    """
    SHA-256 applied twice to a slice of ``data``.

    Args:
        data: Source buffer
        offset: Start of the slice
        length: Slice length (default: to the end of ``data``)

    Returns:
        32-byte digest
    """
    end = len(data) if length is None else offset + length
    return sha256(sha256(bytes(data[offset:end])))


def ripemd160(data: bytes) -> bytes:
    """Single RIPEMD-160 digest."""
    h = hashlib.new("ripemd160")
    h.update(data)
    return h.digest()


def address_hash(data: bytes) -> bytes:
    """
    Hash serialized public key bytes into a 20-byte address payload.

    RIPEMD-160(SHA-256(data)).
    """
    return ripemd160(sha256(data))
