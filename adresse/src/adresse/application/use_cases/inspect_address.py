"""
Inspect Address use case.

Decodes address text against a network and describes what it holds.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from shared.reporter.system_reporter import SystemReporter

from adresse.domain.exceptions import DisplayFormatError, InvalidAddressError
from adresse.domain.value_objects.address import Address
from adresse.domain.value_objects.network_parameters import NetworkParameters

KIND_STANDARD = "standard"
KIND_MULTISIG = "multisig"


@dataclass
class AddressInspection:
    """
    Result of address inspection.

    Attributes:
        text: Input text as given
        network: Network the text was checked against
        valid: Whether the text is a usable address on the network
        version: Version byte (valid only)
        kind: "standard" or "multisig" (valid only)
        payload_hex: 20-byte payload as hex (valid only)
        canonical: Re-encoded text (valid only)
        three_lines: Three-line display form (valid only)
        error_code: Machine-readable failure code (invalid only)
        error: Failure description (invalid only)
    """

    text: Optional[str]
    network: str
    valid: bool
    version: Optional[int] = None
    kind: Optional[str] = None
    payload_hex: Optional[str] = None
    canonical: Optional[str] = None
    three_lines: Optional[str] = None
    error_code: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return asdict(self)


class InspectAddress:
    """
    Decode and classify a single address.

    Business rules:
    - Any decode failure or network mismatch yields valid=False, never raises
    - The failure keeps the specific error code for display
    """

    def __init__(
        self,
        network: NetworkParameters,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            network: Network whose headers the address must carry
            reporter: Optional reporter for outcome logging
        """
        self.network = network
        self.reporter = reporter

    def execute(self, text: Optional[str]) -> AddressInspection:
        """
        Execute address inspection.

        Args:
            text: Base-58 check encoded address

        Returns:
            AddressInspection describing the address or the failure
        """
        try:
            address = Address.parse(text, self.network)
        except InvalidAddressError as e:
            if self.reporter:
                self.reporter.warning(
                    f"Rejected {text!r} on {self.network.name}: {e.message}",
                    context="InspectAddress",
                    verbose_level=2,
                )
            return AddressInspection(
                text=text,
                network=self.network.name,
                valid=False,
                error_code=e.code,
                error=e.message,
            )

        kind = KIND_MULTISIG if address.is_multisig(self.network) else KIND_STANDARD

        try:
            lines = address.three_lines()
        except DisplayFormatError:
            lines = None

        if self.reporter:
            self.reporter.debug(
                f"Accepted {kind} address {address} "
                f"(version 0x{address.version:02x})",
                context="InspectAddress",
            )

        return AddressInspection(
            text=text,
            network=self.network.name,
            valid=True,
            version=address.version,
            kind=kind,
            payload_hex=address.payload.hex(),
            canonical=address.to_string(),
            three_lines=lines,
        )
