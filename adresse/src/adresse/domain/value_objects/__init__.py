"""
Value objects for Adresse domain.
"""

from adresse.domain.value_objects.address import (
    NUM_ADDRESS_BYTES,
    NUM_PAYLOAD_BYTES,
    Address,
)
from adresse.domain.value_objects.network_parameters import (
    MAIN_NET,
    REG_TEST,
    TEST_NET,
    Network,
    NetworkParameters,
    available_networks,
    get_network,
)
from adresse.domain.value_objects.public_key import PublicKey

__all__ = [
    "Address",
    "NUM_ADDRESS_BYTES",
    "NUM_PAYLOAD_BYTES",
    "NetworkParameters",
    "Network",
    "MAIN_NET",
    "TEST_NET",
    "REG_TEST",
    "available_networks",
    "get_network",
    "PublicKey",
]
