"""
Convert Addresses use case.

All-or-nothing conversion between address text lists and Address lists.
"""

from typing import Iterable, List, Optional

from shared.reporter.system_reporter import SystemReporter

from adresse.domain.exceptions import InvalidAddressError
from adresse.domain.value_objects.address import Address
from adresse.domain.value_objects.network_parameters import NetworkParameters


class ConvertAddresses:
    """
    Batch address conversion.

    Business rules:
    - One invalid element fails the whole batch (result is None)
    - Order is preserved otherwise
    - The first failing element is logged with its reason
    """

    def __init__(
        self,
        network: Optional[NetworkParameters] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            network: When given, every address must belong to it
            reporter: Optional reporter for failure logging
        """
        self.network = network
        self.reporter = reporter

    def from_strings(self, texts: Iterable[str]) -> Optional[List[Address]]:
        """Decode every text, or return None if any one fails."""
        addresses = []
        for index, text in enumerate(texts):
            try:
                addresses.append(Address.parse(text, self.network))
            except InvalidAddressError as e:
                if self.reporter:
                    self.reporter.warning(
                        f"Batch rejected at index {index} ({e.code}): {e.message}",
                        context="ConvertAddresses",
                    )
                return None

        if self.reporter:
            self.reporter.debug(
                f"Decoded {len(addresses)} addresses",
                context="ConvertAddresses",
            )
        return addresses

    def to_strings(self, addresses: Iterable[Address]) -> List[str]:
        """Encode every address to its text form."""
        return Address.to_strings(addresses)
