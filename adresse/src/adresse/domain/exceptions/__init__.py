"""
Domain exceptions package.
"""

# Address exceptions
from adresse.domain.exceptions.address import (
    ChecksumMismatchError,
    DisplayFormatError,
    EmptyAddressError,
    InvalidAddressError,
    InvalidAddressLengthError,
    InvalidBase58Error,
    InvalidPayloadLengthError,
    NetworkMismatchError,
)

# Base exceptions
from adresse.domain.exceptions.base import (
    AdresseException,
    InvalidPublicKeyError,
    UnknownNetworkError,
)

__all__ = [
    # Base
    "AdresseException",
    "UnknownNetworkError",
    "InvalidPublicKeyError",
    # Address
    "InvalidAddressError",
    "EmptyAddressError",
    "InvalidBase58Error",
    "ChecksumMismatchError",
    "InvalidAddressLengthError",
    "InvalidPayloadLengthError",
    "NetworkMismatchError",
    "DisplayFormatError",
]
