"""
Exceptions for the gateway module.
"""
from typing import Optional

from jeth_sdk.exceptions import JethError


class GatewayError(JethError):
    """Base exception for ledger gateway errors."""
    pass


class GatewayConnectionError(GatewayError):
    """Raised when the ledger node cannot be reached or answers with an error."""
    pass


class TransmissionFailure(GatewayError):
    """Raised when a signed transaction could not be broadcast."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)
