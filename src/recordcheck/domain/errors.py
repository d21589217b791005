"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Token related errors
# ============================================================================


class MalformedTokenError(DomainError):
    """Raised when a present token string cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Malformed token {value!r}: {reason}.")
        self.value = value
        self.reason = reason


class TokenOverflowError(MalformedTokenError):
    """Raised when the numeric prefix does not fit in a signed 64-bit integer."""

    def __init__(self, value: str, number: int) -> None:
        super().__init__(value, f"number {number} is outside the signed 64-bit range")
        self.number = number
