"""
Unit tests for Address value object.

Tests construction, base58 check encoding, network validation,
equality, hashing and ordering.

Usage:
    python adresse/tests/unit/domain/value_objects/test_address.py
    pytest adresse/tests/unit
"""

import random

from adresse.domain.exceptions import (
    ChecksumMismatchError,
    DisplayFormatError,
    EmptyAddressError,
    InvalidAddressLengthError,
    InvalidBase58Error,
    NetworkMismatchError,
)
from adresse.domain.value_objects.address import Address
from adresse.domain.value_objects.network_parameters import (
    MAIN_NET,
    REG_TEST,
    TEST_NET,
    Network,
)
from adresse.domain.value_objects.public_key import PublicKey
from adresse.infrastructure.crypto import base58_check
from shared.tests import LaborantTest

NULL_MAINNET = "1111111111111111111114oLvT2"
NULL_TESTNET = "mfWxJ45yp2SFn7UciZyNpvDKrzbhyfKrY8"
NULL_MULTISIG_MAINNET = "31h1vYVSYuKP6AhS86fbRdMw9XHieotbST"
NULL_MULTISIG_TESTNET = "2MsFDzHRUAMpjHxKyoEHU3aMCMsVtMqs1PV"

GENESIS_TEXT = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
GENESIS_HASH = bytes.fromhex("62e907b15cbf27d5425399ebf6f0fb50ebb88f18")

GENERATOR_X = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
GENERATOR_Y = "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


class TestAddress(LaborantTest):
    """Unit tests for Address value object."""

    component_name = "adresse"
    test_category = "unit"

    def setup(self):
        """Setup test fixtures."""
        self.genesis = Address.from_standard_bytes(GENESIS_HASH, MAIN_NET)

    # ================================================================
    # Construction tests
    # ================================================================

    def test_from_payload_prepends_version(self):
        """Test from_payload() builds version byte + payload."""
        payload = bytes(range(20))
        address = Address.from_payload(payload, 0x6F)

        assert address.all_bytes == b"\x6f" + payload
        assert address.version == 0x6F
        assert address.payload == payload

    def test_from_payload_masks_version_to_low_byte(self):
        """Test only the low byte of the version is used."""
        address = Address.from_payload(bytes(20), 0x105)

        assert address.version == 0x05

    def test_from_payload_rejects_wrong_length(self):
        """Test from_payload() returns None unless payload is 20 bytes."""
        self.reporter.info("Testing payload length rejection", context="Test")

        assert Address.from_payload(bytes(19), 0) is None
        assert Address.from_payload(bytes(21), 0) is None
        assert Address.from_payload(b"", 0) is None
        assert Address.from_standard_bytes(bytes(19), MAIN_NET) is None
        assert Address.from_multisig_bytes(bytes(32), MAIN_NET) is None

    def test_from_standard_and_multisig_bytes_use_network_headers(self):
        """Test convenience constructors pick the network headers."""
        standard = Address.from_standard_bytes(bytes(20), TEST_NET)
        multisig = Address.from_multisig_bytes(bytes(20), TEST_NET)

        assert standard.version == 0x6F
        assert multisig.version == 0xC4

    def test_constructor_rejects_wrong_length(self):
        """Test direct construction requires exactly 21 bytes."""
        for length in (0, 20, 22, 25):
            try:
                Address(bytes(length))
                assert False, "Should have raised InvalidAddressLengthError"
            except InvalidAddressLengthError as e:
                assert e.length == length
                assert e.code == "INVALID_LENGTH"

    def test_constructor_copies_bytearray(self):
        """Test mutable input is copied into immutable bytes."""
        buffer = bytearray(21)
        address = Address(buffer)
        buffer[5] = 0xFF

        assert isinstance(address.all_bytes, bytes)
        assert address.all_bytes == bytes(21)

    def test_constructor_rejects_non_bytes(self):
        """Test direct construction rejects text input."""
        try:
            Address("1" * 21)
            assert False, "Should have raised TypeError"
        except TypeError:
            pass

    def test_null_address(self):
        """Test null address is all-zero payload with the standard header."""
        mainnet = Address.null_address(MAIN_NET)
        testnet = Address.null_address(TEST_NET)

        assert mainnet.payload == bytes(20)
        assert mainnet.version == 0x00
        assert str(mainnet) == NULL_MAINNET
        assert testnet.version == 0x6F
        assert str(testnet) == NULL_TESTNET

    def test_from_standard_public_key_compressed(self):
        """Test compressed generator point hashes to its known address."""
        self.reporter.info("Testing public key to address", context="Test")

        key = PublicKey.from_hex("02" + GENERATOR_X)
        address = Address.from_standard_public_key(key, MAIN_NET)

        assert address.payload.hex() == "751e76e8199196d454941c45d1b3a323f1433bd6"
        assert str(address) == "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"

    def test_from_standard_public_key_uncompressed_bytes(self):
        """Test raw uncompressed key bytes are accepted."""
        raw = bytes.fromhex("04" + GENERATOR_X + GENERATOR_Y)
        address = Address.from_standard_public_key(raw, MAIN_NET)

        assert str(address) == "1EHNa6Q4Jz2uvNExL497mE43ikXhwF6kZm"
        assert address.is_standard(MAIN_NET)

    # ================================================================
    # Encoding tests
    # ================================================================

    def test_known_genesis_address(self):
        """Test a known payload encodes to its known text."""
        assert str(self.genesis) == GENESIS_TEXT
        assert self.genesis.to_string() == GENESIS_TEXT

    def test_known_multisig_null_addresses(self):
        """Test multisig headers encode to the conventional prefixes."""
        assert str(Address.from_multisig_bytes(bytes(20), MAIN_NET)) == (
            NULL_MULTISIG_MAINNET
        )
        assert str(Address.from_multisig_bytes(bytes(20), TEST_NET)) == (
            NULL_MULTISIG_TESTNET
        )

    def test_text_is_memoized(self):
        """Test text form is computed once and returned unchanged."""
        address = Address(self.genesis.all_bytes)

        first = address.to_string()
        second = address.to_string()

        assert first == second == GENESIS_TEXT
        assert first is second

    def test_known_text_is_used_as_cache(self):
        """Test a supplied text form is returned without recomputation."""
        address = Address(self.genesis.all_bytes, known_text="precomputed")

        assert address.cached_text == "precomputed"
        assert address.to_string() == "precomputed"

    def test_cached_text_reflects_memoized_value(self):
        """Test cached_text is empty until the text form is computed."""
        address = Address(self.genesis.all_bytes)

        assert address.cached_text is None
        assert not hasattr(address, "text")

        address.to_string()

        assert address.cached_text == GENESIS_TEXT

    def test_text_is_excluded_from_equality(self):
        """Test equality ignores the cached text form."""
        cached = Address(self.genesis.all_bytes, "precomputed")

        assert cached == self.genesis
        assert hash(cached) == hash(self.genesis)

    def test_repr_shows_text(self):
        """Test repr() includes the text form."""
        assert repr(self.genesis) == f"Address('{GENESIS_TEXT}')"

    def test_round_trip_random_payloads(self):
        """Test decode(encode(a)) == a for random payloads and versions."""
        self.reporter.info("Testing round trip", context="Test")

        rng = random.Random(1337)
        for _ in range(200):
            payload = bytes(rng.randrange(256) for _ in range(20))
            version = rng.randrange(256)
            address = Address.from_payload(payload, version)

            decoded = Address.from_string(str(address))

            assert decoded == address
            assert decoded.all_bytes == address.all_bytes
            assert str(decoded) == str(address)

    def test_round_trip_edge_payloads(self):
        """Test all-zero and all-0xff payloads round trip for edge versions."""
        for version in (0x00, 0x01, 0x7F, 0x80, 0xFF):
            for payload in (bytes(20), b"\xff" * 20):
                address = Address.from_payload(payload, version)
                assert Address.from_string(str(address)) == address

    # ================================================================
    # Decoding tests
    # ================================================================

    def test_decode_null_mainnet_text(self):
        """Test decoding the null address text yields the null address."""
        address = Address.from_string(NULL_MAINNET)

        assert address == Address.null_address(MAIN_NET)
        assert address.payload == bytes(20)
        assert address.version == MAIN_NET.standard_address_header()

    def test_decode_recomputes_identical_text(self):
        """Test decoded address re-encodes to the input text."""
        address = Address.from_string(GENESIS_TEXT)

        assert address is not None
        assert str(address) == GENESIS_TEXT

    def test_decode_rejects_empty_text(self):
        """Test None and empty text are invalid."""
        assert Address.from_string(None) is None
        assert Address.from_string("") is None

        try:
            Address.parse("")
            assert False, "Should have raised EmptyAddressError"
        except EmptyAddressError as e:
            assert e.code == "EMPTY_ADDRESS"

    def test_decode_rejects_invalid_characters(self):
        """Test characters outside the base58 alphabet are invalid."""
        for bad in ("0" + GENESIS_TEXT[1:], GENESIS_TEXT[:-1] + "O", "I" * 34):
            assert Address.from_string(bad) is None

        try:
            Address.parse(GENESIS_TEXT[:10] + "l" + GENESIS_TEXT[11:])
            assert False, "Should have raised InvalidBase58Error"
        except InvalidBase58Error as e:
            assert e.code == "INVALID_BASE58"

    def test_decode_rejects_surrounding_whitespace(self):
        """Test padded text is not silently trimmed."""
        assert Address.from_string(GENESIS_TEXT + " ") is None
        assert Address.from_string(" " + GENESIS_TEXT) is None

    def test_decode_rejects_altered_trailing_character(self):
        """Test altered final character fails the checksum."""
        altered = GENESIS_TEXT[:-1] + ("b" if GENESIS_TEXT[-1] != "b" else "c")

        assert Address.from_string(altered) is None

        try:
            Address.parse(altered)
            assert False, "Should have raised ChecksumMismatchError"
        except ChecksumMismatchError as e:
            assert e.code == "CHECKSUM_MISMATCH"

    def test_decode_rejects_wrong_overall_length(self):
        """Test valid base58check text of the wrong length is invalid."""
        short_text = base58_check.encode_checked(bytes(20))
        long_text = base58_check.encode_checked(bytes(22))

        assert Address.from_string(short_text) is None
        assert Address.from_string(long_text) is None

        try:
            Address.parse(short_text)
            assert False, "Should have raised InvalidAddressLengthError"
        except InvalidAddressLengthError as e:
            assert e.length == 20

    def test_checksum_catches_single_character_changes(self):
        """Test every single-character substitution fails to decode."""
        self.reporter.info("Testing checksum sensitivity", context="Test")

        accepted = 0
        for position, original in enumerate(GENESIS_TEXT):
            for replacement in BASE58_ALPHABET:
                if replacement == original:
                    continue
                corrupted = (
                    GENESIS_TEXT[:position] + replacement + GENESIS_TEXT[position + 1 :]
                )
                if Address.from_string(corrupted) is not None:
                    accepted += 1

        assert accepted == 0, f"{accepted} corrupted texts decoded"

    # ================================================================
    # Network validation tests
    # ================================================================

    def test_decode_with_network_filters_version(self):
        """Test network decode succeeds only for the network's headers."""
        assert Address.from_string(GENESIS_TEXT, MAIN_NET) == self.genesis
        assert Address.from_string(GENESIS_TEXT, TEST_NET) is None
        assert Address.from_string(NULL_TESTNET, TEST_NET) is not None
        assert Address.from_string(NULL_TESTNET, REG_TEST) is not None
        assert Address.from_string(NULL_TESTNET, MAIN_NET) is None
        assert Address.from_string(NULL_MULTISIG_MAINNET, MAIN_NET) is not None
        assert Address.from_string(NULL_MULTISIG_TESTNET, TEST_NET) is not None

    def test_network_mismatch_error_details(self):
        """Test network mismatch reports version byte and network."""
        try:
            Address.parse(GENESIS_TEXT, TEST_NET)
            assert False, "Should have raised NetworkMismatchError"
        except NetworkMismatchError as e:
            assert e.version == 0x00
            assert e.network_name == "testnet"
            assert e.code == "NETWORK_MISMATCH"

    def test_version_filtering_matches_unfiltered_decode(self):
        """Test filtered decode == unfiltered decode + header check."""
        rng = random.Random(7)
        for _ in range(100):
            address = Address.from_payload(
                bytes(rng.randrange(256) for _ in range(20)), rng.randrange(256)
            )
            text = str(address)
            for network in (MAIN_NET, TEST_NET):
                expected = address.version in (
                    network.standard_address_header(),
                    network.multisig_address_header(),
                )
                assert (Address.from_string(text, network) is not None) == expected

    def test_multisig_validation(self):
        """Test multisig address validity per network."""
        raw = bytes([MAIN_NET.multisig_address_header()]) + bytes(range(20))
        address = Address(raw)

        assert address.is_multisig(MAIN_NET)
        assert not address.is_standard(MAIN_NET)
        assert address.is_valid(MAIN_NET)
        assert not address.is_valid(TEST_NET)
        assert not address.is_multisig(TEST_NET)

    def test_standard_validation(self):
        """Test standard address validity per network."""
        assert self.genesis.is_valid(MAIN_NET)
        assert self.genesis.is_standard(MAIN_NET)
        assert not self.genesis.is_multisig(MAIN_NET)
        assert not self.genesis.is_valid(TEST_NET)

    def test_unknown_version_is_invalid_everywhere(self):
        """Test a version byte registered nowhere is never valid."""
        address = Address.from_payload(bytes(20), 0x30)

        for network in (MAIN_NET, TEST_NET, REG_TEST):
            assert not address.is_valid(network)

    def test_custom_network_parameters(self):
        """Test any NetworkParameters implementation drives validation."""
        custom = Network(
            network_name="custom", standard_header=0x30, multisig_header=0x32
        )
        address = Address.from_standard_bytes(bytes(20), custom)

        assert address.is_valid(custom)
        assert Address.from_string(str(address), custom) == address
        assert Address.from_string(str(address), MAIN_NET) is None

    # ================================================================
    # Accessor tests
    # ================================================================

    def test_payload_is_twenty_bytes_after_version(self):
        """Test payload excludes the version byte."""
        assert self.genesis.payload == GENESIS_HASH
        assert len(self.genesis.payload) == 20
        assert len(self.genesis.all_bytes) == 21

    def test_cannot_modify_bytes(self):
        """Test raw attribute cannot be reassigned."""
        try:
            self.genesis.raw = bytes(21)
            assert False, "Should have raised AttributeError"
        except AttributeError:
            pass

    # ================================================================
    # Three-line display tests
    # ================================================================

    def test_three_lines(self):
        """Test text is split at 12 and 24 characters."""
        lines = self.genesis.three_lines()

        assert lines == "1A1zP1eP5QGe\r\nfi2DMPTfTL5S\r\nLmv7DivfNa"
        assert lines.replace("\r\n", "") == GENESIS_TEXT

    def test_three_lines_shortest_address(self):
        """Test the shortest possible text still splits cleanly."""
        lines = Address.null_address(MAIN_NET).three_lines().split("\r\n")

        assert lines == ["111111111111", "1111111114oL", "vT2"]

    def test_three_lines_rejects_short_text(self):
        """Test text shorter than 24 characters raises instead of slicing."""
        address = Address(self.genesis.all_bytes, "1A1zP1eP5QGefi2DMPT")

        try:
            address.three_lines()
            assert False, "Should have raised DisplayFormatError"
        except DisplayFormatError as e:
            assert e.length == 19
            assert e.required == 24

    # ================================================================
    # Equality, hashing & ordering tests
    # ================================================================

    def test_equality_same_bytes(self):
        """Test addresses with same bytes are equal."""
        other = Address.from_string(GENESIS_TEXT)

        assert self.genesis == other
        assert not (self.genesis != other)

    def test_equality_different_bytes(self):
        """Test addresses differing in one byte are not equal."""
        other = Address.from_payload(GENESIS_HASH, 0x6F)

        assert self.genesis != other

    def test_equality_with_other_types(self):
        """Test comparing with non-addresses returns False."""
        assert self.genesis != GENESIS_TEXT
        assert self.genesis != self.genesis.all_bytes
        assert self.genesis is not None

    def test_hash_uses_bytes_16_to_19_little_endian(self):
        """Test hash packs raw bytes 16..19 little-endian."""
        raw = self.genesis.all_bytes

        expected = raw[16] | raw[17] << 8 | raw[18] << 16 | raw[19] << 24
        assert hash(self.genesis) == expected
        assert hash(self.genesis) == 0x8FB8EB50

    def test_hash_ignores_other_bytes(self):
        """Test unequal addresses may share a hash."""
        a = Address.from_payload(bytes(20), 0x00)
        b = Address.from_payload(bytes(20), 0x6F)

        assert a != b
        assert hash(a) == hash(b)

    def test_equal_addresses_have_equal_hashes(self):
        """Test equality implies equal hashes."""
        assert hash(Address.from_string(GENESIS_TEXT)) == hash(self.genesis)

    def test_works_in_set_and_dict(self):
        """Test addresses work as set members and dict keys."""
        a = Address.null_address(MAIN_NET)
        b = Address.null_address(TEST_NET)
        c = Address.from_string(NULL_MAINNET)

        assert len({a, b, c}) == 2
        assert {a: "main", b: "test"}[c] == "main"

    def test_ordering_is_unsigned(self):
        """Test bytes >= 0x80 order after smaller bytes."""
        low = Address.from_payload(bytes(20), 0x6F)
        high = Address.from_payload(bytes(20), 0xC4)

        assert low < high
        assert high > low
        assert low <= high
        assert not (high < low)

    def test_ordering_first_differing_byte_decides(self):
        """Test lexicographic comparison over all 21 bytes."""
        a = Address(bytes([0]) + bytes(19) + b"\x01")
        b = Address(bytes([0]) + b"\x01" + bytes(19))

        assert a < b
        assert sorted([b, a]) == [a, b]

    def test_ordering_is_total_and_consistent_with_equality(self):
        """Test sorting random addresses matches sorting raw bytes."""
        rng = random.Random(42)
        addresses = []
        for _ in range(60):
            payload = bytes(rng.randrange(4) for _ in range(20))
            addresses.append(Address.from_payload(payload, rng.randrange(2)))

        ordered = sorted(addresses)

        assert [a.all_bytes for a in ordered] == sorted(a.all_bytes for a in addresses)
        for a in addresses:
            for b in addresses:
                assert (a == b) == (not a < b and not b < a)
                assert (a <= b) == (a < b or a == b)
                assert (a >= b) == (b <= a)

    # ================================================================
    # Batch helper tests
    # ================================================================

    def test_from_strings_preserves_order(self):
        """Test batch decode keeps input order."""
        texts = [NULL_MAINNET, GENESIS_TEXT, NULL_MULTISIG_MAINNET]

        addresses = Address.from_strings(texts, MAIN_NET)

        assert [str(a) for a in addresses] == texts

    def test_from_strings_fails_whole_batch(self):
        """Test one invalid element fails the whole batch."""
        assert Address.from_strings([GENESIS_TEXT, "invalid"]) is None
        assert Address.from_strings([GENESIS_TEXT, NULL_TESTNET], MAIN_NET) is None
        assert Address.from_strings([GENESIS_TEXT, NULL_TESTNET]) is not None

    def test_from_strings_empty_batch(self):
        """Test empty batch converts to an empty list."""
        assert Address.from_strings([]) == []

    def test_to_strings(self):
        """Test batch encode keeps input order."""
        addresses = [self.genesis, Address.null_address(TEST_NET)]

        assert Address.to_strings(addresses) == [GENESIS_TEXT, NULL_TESTNET]


if __name__ == "__main__":
    TestAddress.run_as_main()
