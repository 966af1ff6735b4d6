"""
Base domain exceptions.
"""


class AdresseException(Exception):
    """Base exception for all Adresse domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class UnknownNetworkError(AdresseException):
    """Raised when a network name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown network: {name}", code="UNKNOWN_NETWORK")
        self.name = name


class InvalidPublicKeyError(AdresseException):
    """Raised when serialized public key bytes are malformed."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid public key: {reason}", code="INVALID_PUBLIC_KEY")
        self.reason = reason
