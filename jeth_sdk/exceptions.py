"""
Exceptions for the jeth SDK.
"""
from typing import Optional, Sequence


class JethError(Exception):
    """Base exception for all jeth SDK errors."""
    pass


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class IdentityError(JethError):
    """Base exception for key pair derivation and validation errors."""
    pass


class InvalidScalar(IdentityError):
    """Raised when a private scalar is zero or not below the curve order."""
    pass


class InvalidPublicPoint(IdentityError):
    """Raised when a public point is the point at infinity or is off the curve."""
    pass


class InvalidKeyEncoding(IdentityError):
    """Raised when hex key material has the wrong length or alphabet."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class RandomSourceFailure(IdentityError):
    """Raised when secure randomness could not be obtained."""
    pass


class IdentityMismatch(IdentityError):
    """
    Raised when a key pair does not match the one re-derived from its private scalar.

    Attributes:
        field: First diverging field ("private_scalar", "public_point" or "address")
        expected: Value of that field on the re-derived key pair
        actual: Value of that field on the key pair being checked
        fields: Every diverging field, in comparison order
    """

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        fields: Optional[Sequence[str]] = None
    ):
        self.field = field
        self.expected = expected
        self.actual = actual
        self.fields = tuple(fields) if fields else (field,)
        super().__init__(
            f"{field} does not match the value derived from the private key: "
            f"expected: \"{expected}\", actual: \"{actual}\""
        )


# ---------------------------------------------------------------------------
# Value accounting
# ---------------------------------------------------------------------------

class ValueAccountingError(JethError):
    """Base exception for unit conversion and gas netting errors."""
    pass


class NegativeAmount(ValueAccountingError):
    """Raised when an amount that must be non-negative is negative."""
    pass


class InvalidAmount(ValueAccountingError):
    """Raised when an amount is not a finite number."""
    pass


class DivideByZeroPrice(ValueAccountingError):
    """Raised when a fiat price of zero or less would be divided by."""
    pass


class InvalidGasParameters(ValueAccountingError):
    """Raised when a gas price or gas limit is out of range."""
    pass


class InsufficientAmountForGas(ValueAccountingError):
    """Raised when gas would consume the whole requested amount or more."""

    def __init__(self, message: str, requested: Optional[int] = None, gas_cost: Optional[int] = None):
        self.requested = requested
        self.gas_cost = gas_cost
        super().__init__(message)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class PriceUnavailable(JethError):
    """Raised when the fiat price source cannot produce a price."""
    pass
