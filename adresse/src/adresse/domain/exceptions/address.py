"""
Address-related exceptions.

Every decode or construction failure is an InvalidAddressError subclass,
so callers can catch one type and still read the specific ``code``.
"""

from adresse.domain.exceptions.base import AdresseException


class InvalidAddressError(AdresseException):
    """Base exception for unusable addresses."""

    def __init__(self, message: str, code: str = "INVALID_ADDRESS"):
        super().__init__(message, code=code)


class EmptyAddressError(InvalidAddressError):
    """Raised when address text is None or empty."""

    def __init__(self):
        super().__init__("Address text is empty", code="EMPTY_ADDRESS")


class InvalidBase58Error(InvalidAddressError):
    """Raised when text is not valid base-58."""

    def __init__(self, reason: str):
        """
        Initialize invalid base-58 error.

        Args:
            reason: What made the text undecodable
        """
        super().__init__(f"Invalid base58 text: {reason}", code="INVALID_BASE58")
        self.reason = reason


class ChecksumMismatchError(InvalidAddressError):
    """Raised when the trailing 4-byte checksum does not verify."""

    def __init__(self, expected: bytes = b"", actual: bytes = b""):
        """
        Initialize checksum mismatch error.

        Args:
            expected: Checksum computed from the decoded prefix
            actual: Checksum found at the end of the decoded bytes
        """
        if expected or actual:
            message = (
                f"Checksum mismatch: expected {expected.hex()}, "
                f"found {actual.hex()}"
            )
        else:
            message = "Checksum mismatch: input too short to carry a checksum"
        super().__init__(message, code="CHECKSUM_MISMATCH")
        self.expected = expected
        self.actual = actual


class InvalidAddressLengthError(InvalidAddressError):
    """Raised when decoded address bytes are not version + 20 bytes."""

    def __init__(self, length: int, expected: int = 21):
        super().__init__(
            f"Invalid address length: {length} bytes (expected {expected})",
            code="INVALID_LENGTH",
        )
        self.length = length
        self.expected = expected


class InvalidPayloadLengthError(InvalidAddressError):
    """Raised when a hash payload is not 20 bytes."""

    def __init__(self, length: int, expected: int = 20):
        super().__init__(
            f"Invalid payload length: {length} bytes (expected {expected})",
            code="INVALID_PAYLOAD_LENGTH",
        )
        self.length = length
        self.expected = expected


class NetworkMismatchError(InvalidAddressError):
    """Raised when the version byte is not registered for a network."""

    def __init__(self, version: int, network_name: str):
        """
        Initialize network mismatch error.

        Args:
            version: Version byte found in the address
            network_name: Network the address was checked against
        """
        super().__init__(
            f"Version byte 0x{version:02x} is not a {network_name} address header",
            code="NETWORK_MISMATCH",
        )
        self.version = version
        self.network_name = network_name


class DisplayFormatError(InvalidAddressError):
    """Raised when address text is too short for the three-line layout."""

    def __init__(self, length: int, required: int):
        super().__init__(
            f"Address text has {length} characters, "
            f"three-line display needs at least {required}",
            code="DISPLAY_FORMAT",
        )
        self.length = length
        self.required = required
