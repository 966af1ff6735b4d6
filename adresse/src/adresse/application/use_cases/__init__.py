"""
Application use cases.
"""

from adresse.application.use_cases.convert_addresses import ConvertAddresses
from adresse.application.use_cases.inspect_address import (
    KIND_MULTISIG,
    KIND_STANDARD,
    AddressInspection,
    InspectAddress,
)

__all__ = [
    "ConvertAddresses",
    "InspectAddress",
    "AddressInspection",
    "KIND_STANDARD",
    "KIND_MULTISIG",
]
