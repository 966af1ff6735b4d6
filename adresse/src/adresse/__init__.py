"""
Adresse - Checksummed base-58 addresses for public key and multisig hashes.
"""

from adresse.domain.value_objects import (
    MAIN_NET,
    REG_TEST,
    TEST_NET,
    Address,
    Network,
    NetworkParameters,
    PublicKey,
    get_network,
)

__version__ = "0.1.0"

__all__ = [
    "Address",
    "NetworkParameters",
    "Network",
    "MAIN_NET",
    "TEST_NET",
    "REG_TEST",
    "get_network",
    "PublicKey",
]
