"""
NetworkParameters value objects - Address header bytes per network.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List

from adresse.domain.exceptions import UnknownNetworkError


class NetworkParameters(ABC):
    """
    Capability interface supplying the two address header bytes.

    Only the low byte of each header is used by the address codec.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable network name."""

    @abstractmethod
    def standard_address_header(self) -> int:
        """Version byte of pay-to-public-key-hash addresses."""

    @abstractmethod
    def multisig_address_header(self) -> int:
        """Version byte of multisig script-hash addresses."""


@dataclass(frozen=True)
class Network(NetworkParameters):
    """
    Value object for a concrete network.

    Business rules:
    - Headers must fit in one byte
    - Standard and multisig headers must differ
    """

    network_name: str
    standard_header: int
    multisig_header: int

    def __post_init__(self):
        """Validate header bytes on creation."""
        if not self.network_name:
            raise ValueError("Network name is required")

        for header in (self.standard_header, self.multisig_header):
            if not 0 <= header <= 0xFF:
                raise ValueError(f"Address header out of byte range: {header}")

        if self.standard_header == self.multisig_header:
            raise ValueError("Standard and multisig headers must differ")

    @property
    def name(self) -> str:
        return self.network_name

    def standard_address_header(self) -> int:
        return self.standard_header

    def multisig_address_header(self) -> int:
        return self.multisig_header

    def __str__(self) -> str:
        return self.network_name


# Predefined network configurations
MAIN_NET = Network(network_name="mainnet", standard_header=0x00, multisig_header=0x05)
TEST_NET = Network(network_name="testnet", standard_header=0x6F, multisig_header=0xC4)
REG_TEST = Network(network_name="regtest", standard_header=0x6F, multisig_header=0xC4)

_NETWORKS: Dict[str, Network] = {
    "mainnet": MAIN_NET,
    "main": MAIN_NET,
    "prodnet": MAIN_NET,
    "production": MAIN_NET,
    "testnet": TEST_NET,
    "test": TEST_NET,
    "regtest": REG_TEST,
}


def available_networks() -> List[str]:
    """Canonical names of the registered networks."""
    return [MAIN_NET.name, TEST_NET.name, REG_TEST.name]


def get_network(name: str) -> Network:
    """Get network parameters by name (case-insensitive)."""
    network = _NETWORKS.get((name or "").strip().lower())
    if network is None:
        raise UnknownNetworkError(name)

    return network
