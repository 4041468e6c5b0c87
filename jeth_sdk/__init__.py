"""
jeth SDK - Ethereum key pairs, exact unit conversion and gas-netted payments.
"""
from .version import __version__
from .client import WalletClient
from .models import BalanceReport, PreparedSend
from .identity import KeyPair, PrivateScalar, PublicPoint, Address
from .accounting import MonetaryAmount, PaymentQuote, TransactionCost
from .price import FiatPriceSource, CoinbasePriceSource, StaticPriceSource
from .gateway import LedgerGateway, Web3Gateway, StubGateway
from .exceptions import (
    JethError, IdentityError, InvalidScalar, InvalidPublicPoint, InvalidKeyEncoding,
    IdentityMismatch, RandomSourceFailure, ValueAccountingError, NegativeAmount,
    InvalidAmount, DivideByZeroPrice, InvalidGasParameters, InsufficientAmountForGas,
    PriceUnavailable
)
from .gateway.exceptions import GatewayError, GatewayConnectionError, TransmissionFailure

__all__ = [
    "WalletClient",
    "BalanceReport",
    "PreparedSend",
    "KeyPair",
    "PrivateScalar",
    "PublicPoint",
    "Address",
    "MonetaryAmount",
    "PaymentQuote",
    "TransactionCost",
    "FiatPriceSource",
    "CoinbasePriceSource",
    "StaticPriceSource",
    "LedgerGateway",
    "Web3Gateway",
    "StubGateway",
    "JethError",
    "IdentityError",
    "InvalidScalar",
    "InvalidPublicPoint",
    "InvalidKeyEncoding",
    "IdentityMismatch",
    "RandomSourceFailure",
    "ValueAccountingError",
    "NegativeAmount",
    "InvalidAmount",
    "DivideByZeroPrice",
    "InvalidGasParameters",
    "InsufficientAmountForGas",
    "PriceUnavailable",
    "GatewayError",
    "GatewayConnectionError",
    "TransmissionFailure",
    "__version__",
]
