"""
PublicKey value object - Serialized SEC public key bytes.
"""

from dataclasses import dataclass

from adresse.domain.exceptions import InvalidPublicKeyError

COMPRESSED_LENGTH = 33
UNCOMPRESSED_LENGTH = 65


@dataclass(frozen=True)
class PublicKey:
    """
    Value object wrapping a serialized elliptic-curve public key.

    Business rules:
    - Compressed keys are 33 bytes starting with 0x02 or 0x03
    - Uncompressed keys are 65 bytes starting with 0x04
    - No curve arithmetic; the point is not checked to be on the curve
    """

    public_key_bytes: bytes

    def __post_init__(self):
        """Validate serialized key layout on creation."""
        data = self.public_key_bytes
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
            object.__setattr__(self, "public_key_bytes", data)

        if not isinstance(data, bytes):
            raise InvalidPublicKeyError(f"expected bytes, got {type(data).__name__}")

        if len(data) == COMPRESSED_LENGTH:
            if data[0] not in (0x02, 0x03):
                raise InvalidPublicKeyError(
                    f"compressed key prefix 0x{data[0]:02x} is not 0x02 or 0x03"
                )
        elif len(data) == UNCOMPRESSED_LENGTH:
            if data[0] != 0x04:
                raise InvalidPublicKeyError(
                    f"uncompressed key prefix 0x{data[0]:02x} is not 0x04"
                )
        else:
            raise InvalidPublicKeyError(f"unexpected length {len(data)}")

    @classmethod
    def from_hex(cls, text: str) -> "PublicKey":
        """Build from a hex string."""
        try:
            data = bytes.fromhex(text)
        except (TypeError, ValueError) as e:
            raise InvalidPublicKeyError(f"not hex: {e}") from e
        return cls(data)

    @property
    def is_compressed(self) -> bool:
        return len(self.public_key_bytes) == COMPRESSED_LENGTH

    def hex(self) -> str:
        return self.public_key_bytes.hex()

    def __str__(self) -> str:
        return self.hex()
