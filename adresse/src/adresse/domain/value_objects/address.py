"""
Address value object - Checksummed base-58 address.

The canonical form is 21 bytes: one version byte followed by a 20-byte
public key hash or multisig script hash. The text form is the base-58
encoding of those 21 bytes plus a 4-byte double-SHA-256 checksum.
"""

from dataclasses import InitVar, dataclass
from functools import total_ordering
from typing import Iterable, List, Optional, Union

from adresse.domain.exceptions import (
    DisplayFormatError,
    EmptyAddressError,
    InvalidAddressError,
    InvalidAddressLengthError,
    NetworkMismatchError,
)
from adresse.domain.value_objects.network_parameters import NetworkParameters
from adresse.domain.value_objects.public_key import PublicKey
from adresse.infrastructure.crypto import base58_check, hash_utils

NUM_ADDRESS_BYTES = 21
NUM_PAYLOAD_BYTES = 20

# Three-line display segment boundaries
LINE_BREAKS = (12, 24)
LINE_SEPARATOR = "\r\n"


def _header(value: int) -> int:
    return value & 0xFF


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class Address:
    """
    Value object representing a versioned 20-byte hash.

    Business rules:
    - Always exactly 21 bytes (version + payload)
    - Immutable; only the text form is computed lazily and memoized
    - Equality and ordering compare the raw bytes, never the text
    - Hash uses raw bytes 16..19 only, so unequal addresses may collide
    """

    raw: bytes
    known_text: InitVar[Optional[str]] = None

    def __post_init__(self, known_text: Optional[str]):
        """
        Validate raw bytes on creation.

        Args:
            known_text: Known-correct text form, used as the cache without
                verification
        """
        raw = self.raw
        if isinstance(raw, (bytearray, memoryview)):
            raw = bytes(raw)
            object.__setattr__(self, "raw", raw)

        if not isinstance(raw, bytes):
            raise TypeError(f"Address bytes must be bytes, not {type(raw).__name__}")

        if len(raw) != NUM_ADDRESS_BYTES:
            raise InvalidAddressLengthError(len(raw), NUM_ADDRESS_BYTES)

        object.__setattr__(self, "_text", known_text)

    # ================================================================
    # Construction
    # ================================================================

    @classmethod
    def from_payload(cls, payload: bytes, version: int) -> Optional["Address"]:
        """
        Build from a 20-byte payload and a version byte.

        Returns:
            Address, or None if the payload is not 20 bytes
        """
        if payload is None or len(payload) != NUM_PAYLOAD_BYTES:
            return None
        return cls(bytes([_header(version)]) + bytes(payload))

    @classmethod
    def from_standard_bytes(
        cls, pubkey_hash: bytes, network: NetworkParameters
    ) -> Optional["Address"]:
        """Build a standard address from a 20-byte public key hash."""
        return cls.from_payload(pubkey_hash, network.standard_address_header())

    @classmethod
    def from_multisig_bytes(
        cls, script_hash: bytes, network: NetworkParameters
    ) -> Optional["Address"]:
        """Build a multisig address from a 20-byte script hash."""
        return cls.from_payload(script_hash, network.multisig_address_header())

    @classmethod
    def from_standard_public_key(
        cls, public_key: Union[PublicKey, bytes], network: NetworkParameters
    ) -> "Address":
        """Build the standard address paying to a serialized public key."""
        if not isinstance(public_key, PublicKey):
            public_key = PublicKey(public_key)
        payload = hash_utils.address_hash(public_key.public_key_bytes)
        return cls(bytes([_header(network.standard_address_header())]) + payload)

    @classmethod
    def null_address(cls, network: NetworkParameters) -> "Address":
        """All-zero payload with the standard header. Never spendable."""
        return cls(
            bytes([_header(network.standard_address_header())])
            + bytes(NUM_PAYLOAD_BYTES)
        )

    @classmethod
    def parse(
        cls, text: Optional[str], network: Optional[NetworkParameters] = None
    ) -> "Address":
        """
        Decode address text, raising on any failure.

        Args:
            text: Base-58 check encoded address
            network: When given, the version byte must be one of its headers

        Returns:
            Decoded address (text cache left empty)

        Raises:
            EmptyAddressError: Text is None or empty
            InvalidBase58Error: Text has characters outside the alphabet
            ChecksumMismatchError: Checksum does not verify
            InvalidAddressLengthError: Decoded bytes are not 21 long
            NetworkMismatchError: Version byte not registered for network
        """
        if not text:
            raise EmptyAddressError()

        raw = base58_check.decode_checked_strict(text)
        if len(raw) != NUM_ADDRESS_BYTES:
            raise InvalidAddressLengthError(len(raw), NUM_ADDRESS_BYTES)

        address = cls(raw)
        if network is not None and not address.is_valid(network):
            raise NetworkMismatchError(address.version, network.name)

        return address

    @classmethod
    def from_string(
        cls, text: Optional[str], network: Optional[NetworkParameters] = None
    ) -> Optional["Address"]:
        """Decode address text. Returns None if it is not a usable address."""
        try:
            return cls.parse(text, network)
        except InvalidAddressError:
            return None

    # ================================================================
    # Batch helpers
    # ================================================================

    @classmethod
    def from_strings(
        cls, texts: Iterable[str], network: Optional[NetworkParameters] = None
    ) -> Optional[List["Address"]]:
        """Decode every text, or return None if any one fails."""
        addresses = []
        for text in texts:
            address = cls.from_string(text, network)
            if address is None:
                return None
            addresses.append(address)
        return addresses

    @staticmethod
    def to_strings(addresses: Iterable["Address"]) -> List[str]:
        return [address.to_string() for address in addresses]

    # ================================================================
    # Accessors
    # ================================================================

    @property
    def version(self) -> int:
        return self.raw[0]

    @property
    def all_bytes(self) -> bytes:
        """The 21 canonical bytes (version + payload), without checksum."""
        return self.raw

    @property
    def payload(self) -> bytes:
        """The 20 bytes following the version byte."""
        return self.raw[1:]

    @property
    def cached_text(self) -> Optional[str]:
        """The memoized text form, or None until to_string() runs."""
        return self._text

    # ================================================================
    # Validation
    # ================================================================

    def is_valid(self, network: NetworkParameters) -> bool:
        """Check length and that the version is one of the network headers."""
        if len(self.raw) != NUM_ADDRESS_BYTES:
            return False
        return self.is_standard(network) or self.is_multisig(network)

    def is_standard(self, network: NetworkParameters) -> bool:
        return self.version == _header(network.standard_address_header())

    def is_multisig(self, network: NetworkParameters) -> bool:
        return self.version == _header(network.multisig_address_header())

    # ================================================================
    # Text form
    # ================================================================

    def to_string(self) -> str:
        """Base-58 text of the 21 bytes plus checksum, memoized."""
        if self._text is None:
            # Racing writers store the same string
            object.__setattr__(self, "_text", base58_check.encode_checked(self.raw))
        return self._text

    def three_lines(self) -> str:
        """
        Split the text form into three lines for printed material.

        Raises:
            DisplayFormatError: Text shorter than the second break
        """
        text = self.to_string()
        first, second = LINE_BREAKS
        if len(text) < second:
            raise DisplayFormatError(len(text), second)

        return LINE_SEPARATOR.join((text[:first], text[first:second], text[second:]))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Address('{self.to_string()}')"

    # ================================================================
    # Equality, hashing & ordering
    # ================================================================

    def __eq__(self, other) -> bool:
        """Compare addresses by raw bytes."""
        if other is self:
            return True
        if not isinstance(other, Address):
            return False
        return self.raw == other.raw

    def __hash__(self) -> int:
        return int.from_bytes(self.raw[16:20], "little")

    def __lt__(self, other) -> bool:
        """Unsigned lexicographic order over the raw bytes."""
        if not isinstance(other, Address):
            return NotImplemented
        return self.raw < other.raw
