"""
Cryptographic primitives consumed by the address codec.
"""

from adresse.infrastructure.crypto import base58_check, hash_utils

__all__ = ["base58_check", "hash_utils"]
