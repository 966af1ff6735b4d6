"""Emoji definitions for system reporting."""

from shared.reporter.emojis.address_emojis import AddressEmoji
from shared.reporter.emojis.base_emojis import ComponentEmoji

__all__ = [
    "AddressEmoji",
    "ComponentEmoji",
]
