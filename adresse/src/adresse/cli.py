"""
Adresse CLI - Command-line interface for address encoding and inspection.

Provides commands for:
- Decoding and classifying address text
- Encoding a 20-byte hash as a standard or multisig address
- Deriving the standard address of a public key
- Three-line display form
- Null address of a network

Results go to stdout; diagnostics go through SystemReporter.
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from shared.reporter.emojis import AddressEmoji
from shared.reporter.system_reporter import SystemReporter

from adresse.application.use_cases.inspect_address import (
    KIND_MULTISIG,
    InspectAddress,
)
from adresse.config.settings import Settings, get_settings
from adresse.domain.exceptions import (
    AdresseException,
    InvalidPayloadLengthError,
    InvalidPublicKeyError,
)
from adresse.domain.value_objects.address import Address
from adresse.domain.value_objects.network_parameters import (
    NetworkParameters,
    available_networks,
    get_network,
)
from adresse.domain.value_objects.public_key import PublicKey


def decode_addresses(
    texts: List[str],
    network: NetworkParameters,
    as_json: bool,
    reporter: SystemReporter,
) -> int:
    """
    Inspect each address text.

    Returns:
        Exit code (0 = all valid, 1 = at least one invalid)
    """
    inspect = InspectAddress(network, reporter=reporter)
    results = [inspect.execute(text) for text in texts]

    if as_json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for r in results:
            if r.valid:
                emoji = (
                    AddressEmoji.MULTISIG
                    if r.kind == KIND_MULTISIG
                    else AddressEmoji.STANDARD
                )
                print(
                    f"{AddressEmoji.VALID} {r.canonical} {emoji} {r.kind} "
                    f"version=0x{r.version:02x} payload={r.payload_hex}"
                )
            else:
                print(f"{AddressEmoji.INVALID} {r.text} {r.error_code}: {r.error}")

    invalid = sum(1 for r in results if not r.valid)
    if invalid:
        reporter.warning(
            f"{invalid} of {len(results)} addresses invalid on {network.name}",
            context="CLI",
        )
        return 1

    reporter.info(
        f"{AddressEmoji.INFO} {len(results)} addresses valid on {network.name}",
        context="CLI",
        verbose_level=2,
    )
    return 0


def encode_payload(
    payload_hex: str,
    multisig: bool,
    network: NetworkParameters,
    reporter: SystemReporter,
) -> int:
    """Build an address from a hex payload."""
    try:
        payload = bytes.fromhex(payload_hex)
    except ValueError as e:
        reporter.error(
            f"{AddressEmoji.INVALID} Payload is not hex: {e}", context="CLI"
        )
        return 1

    if multisig:
        address = Address.from_multisig_bytes(payload, network)
    else:
        address = Address.from_standard_bytes(payload, network)

    if address is None:
        error = InvalidPayloadLengthError(len(payload))
        reporter.error(
            f"{AddressEmoji.INVALID} {error.code}: {error.message}", context="CLI"
        )
        return 1

    print(address)
    return 0


def address_of_public_key(
    pubkey_hex: str, network: NetworkParameters, reporter: SystemReporter
) -> int:
    """Print the standard address paying to a serialized public key."""
    try:
        public_key = PublicKey.from_hex(pubkey_hex)
    except InvalidPublicKeyError as e:
        reporter.error(
            f"{AddressEmoji.INVALID} {e.code}: {e.message}", context="CLI"
        )
        return 1

    address = Address.from_standard_public_key(public_key, network)
    form = "compressed" if public_key.is_compressed else "uncompressed"
    reporter.debug(f"{AddressEmoji.KEY} {form} key -> {address}", context="CLI")
    print(address)
    return 0


def print_three_lines(text: str, reporter: SystemReporter) -> int:
    """Print the three-line form of any valid address."""
    address = Address.from_string(text)
    if address is None:
        reporter.error(
            f"{AddressEmoji.INVALID} Not a valid address: {text}", context="CLI"
        )
        return 1

    print(address.three_lines().replace("\r\n", "\n"))
    return 0


def print_null_address(
    network: NetworkParameters, reporter: SystemReporter
) -> int:
    """Print the sentinel address of a network."""
    address = Address.null_address(network)
    reporter.debug(
        f"{AddressEmoji.NULL} Null address of {network.name}", context="CLI"
    )
    print(address)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="adresse",
        description="Checksummed base-58 address tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  adresse decode 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa
  adresse decode --network testnet --json mfWxJ45yp2SFn7UciZyNpvDKrzbhyfKrY8
  adresse encode 62e907b15cbf27d5425399ebf6f0fb50ebb88f18
  adresse encode --multisig --network testnet <40 hex chars>
  adresse pubkey 0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
  adresse lines 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa
  adresse null --network testnet
        """,
    )

    network_help = (
        f"Network name ({', '.join(available_networks())}); "
        "default from NETWORK setting"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output"
    )

    # Accepted after the subcommand too; SUPPRESS keeps a leading -v intact
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Verbose output",
    )

    subparsers = parser.add_subparsers(
        dest="command", help="Command to run", required=True
    )

    decode_parser = subparsers.add_parser(
        "decode", parents=[common], help="Decode and classify addresses"
    )
    decode_parser.add_argument("addresses", nargs="+", help="Address text")
    decode_parser.add_argument("--network", help=network_help)
    decode_parser.add_argument("--json", action="store_true", help="JSON output")

    encode_parser = subparsers.add_parser(
        "encode", parents=[common], help="Encode a 20-byte hash"
    )
    encode_parser.add_argument("payload", help="Payload as 40 hex characters")
    encode_parser.add_argument(
        "--multisig", action="store_true", help="Use the multisig header"
    )
    encode_parser.add_argument("--network", help=network_help)

    pubkey_parser = subparsers.add_parser(
        "pubkey", parents=[common], help="Standard address of a public key"
    )
    pubkey_parser.add_argument("public_key", help="Serialized public key as hex")
    pubkey_parser.add_argument("--network", help=network_help)

    lines_parser = subparsers.add_parser(
        "lines", parents=[common], help="Three-line display form"
    )
    lines_parser.add_argument("address", help="Address text")

    null_parser = subparsers.add_parser(
        "null", parents=[common], help="Null address of a network"
    )
    null_parser.add_argument("--network", help=network_help)

    return parser


def build_reporter(settings: Settings, verbose: bool) -> SystemReporter:
    """Reporter configured from settings, raised to debug by --verbose."""
    return SystemReporter(
        name="adresse_cli",
        log_dir=settings.LOG_DIR,
        level="DEBUG" if verbose else settings.LOG_LEVEL,
        verbose=3 if verbose else settings.VERBOSE,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        cli_reporter = build_reporter(settings, args.verbose)
    except (ValidationError, yaml.YAMLError, OSError) as e:
        SystemReporter(name="adresse_cli").error(
            f"{AddressEmoji.INVALID} Invalid configuration: {e}", context="CLI"
        )
        return 2

    try:
        network_name = getattr(args, "network", None) or settings.NETWORK
        network = get_network(network_name)
        cli_reporter.debug(
            f"{AddressEmoji.NETWORK} Using network {network.name}", context="CLI"
        )

        if args.command == "decode":
            return decode_addresses(args.addresses, network, args.json, cli_reporter)

        elif args.command == "encode":
            return encode_payload(args.payload, args.multisig, network, cli_reporter)

        elif args.command == "pubkey":
            return address_of_public_key(args.public_key, network, cli_reporter)

        elif args.command == "lines":
            return print_three_lines(args.address, cli_reporter)

        elif args.command == "null":
            return print_null_address(network, cli_reporter)

    except AdresseException as e:
        cli_reporter.error(
            f"{AddressEmoji.INVALID} {e.code}: {e.message}", context="CLI"
        )
        return 2

    except KeyboardInterrupt:
        cli_reporter.warning(
            f"{AddressEmoji.WARNING} Interrupted by user", context="CLI"
        )
        return 2

    return 2


if __name__ == "__main__":
    sys.exit(main())
