"""
Address tooling emoji definitions.

Usage:
    >>> from shared.reporter.emojis import AddressEmoji
    >>> print(f"{AddressEmoji.VALID} 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
    ✅ 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class AddressEmoji(ComponentEmoji):
    """
    Address decoding and display emojis.

    Categories:
        - Outcome: Valid, invalid
        - Kind: Standard, multisig, null
        - Context: Network, key, info
    """

    # ============================================================
    # Outcome
    # ============================================================
    VALID = "✅"  # Address decoded and accepted
    INVALID = "❌"  # Address rejected
    WARNING = "⚠️"  # Suspicious input

    # ============================================================
    # Address Kind
    # ============================================================
    STANDARD = "🏷️"  # Pay-to-public-key-hash
    MULTISIG = "🔐"  # Multisig script hash
    NULL = "🕳️"  # Sentinel address

    # ============================================================
    # Context
    # ============================================================
    NETWORK = "🌐"  # Network parameters
    KEY = "🔑"  # Public key
    INFO = "ℹ️"  # Informational line
