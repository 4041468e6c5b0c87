"""
Monetary amounts with wei as the unit of record.
"""
from dataclasses import dataclass
from decimal import Decimal

from jeth_sdk.accounting.units import (
    AmountLike, base_to_fiat, base_to_fractional, base_to_gwei, fiat_to_base,
    format_decimal, fractional_to_base, gwei_to_base
)
from jeth_sdk.exceptions import NegativeAmount


@dataclass(frozen=True, order=True)
class MonetaryAmount:
    """
    A non-negative amount of ether, stored as an integer number of wei.

    The ether, gwei and USD views are derived on demand, so the stored
    value never drifts.
    """
    wei: int

    def __post_init__(self):
        if isinstance(self.wei, bool) or not isinstance(self.wei, int):
            raise TypeError(f"wei must be an int, got {type(self.wei).__name__}")
        if self.wei < 0:
            raise NegativeAmount(f"amount must not be negative, got {self.wei} wei")

    @classmethod
    def from_ether(cls, amount: AmountLike) -> "MonetaryAmount":
        return cls(fractional_to_base(amount))

    @classmethod
    def from_gwei(cls, amount: AmountLike) -> "MonetaryAmount":
        return cls(gwei_to_base(amount))

    @classmethod
    def from_usd(cls, amount: AmountLike, usd_per_ether: float) -> "MonetaryAmount":
        return cls(fiat_to_base(amount, usd_per_ether))

    @property
    def ether(self) -> Decimal:
        return base_to_fractional(self.wei)

    @property
    def gwei(self) -> Decimal:
        return base_to_gwei(self.wei)

    def usd(self, usd_per_ether: float) -> Decimal:
        return base_to_fiat(self.wei, usd_per_ether)

    def __add__(self, other: "MonetaryAmount") -> "MonetaryAmount":
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return MonetaryAmount(self.wei + other.wei)

    def __sub__(self, other: "MonetaryAmount") -> "MonetaryAmount":
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return MonetaryAmount(self.wei - other.wei)

    def __str__(self) -> str:
        return f"{format_decimal(self.ether)} ether"
