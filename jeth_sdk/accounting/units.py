"""
Unit conversion between wei, gwei, ether and USD.

Every amount that can end up in a transaction is kept as an ``int`` (wei) or
a ``decimal.Decimal`` (gwei, ether, USD). Each operation runs in a local
decimal context wide enough for the operands, so multiplying by a power of
ten is always exact. Decimal to wei conversion truncates toward zero: a
fraction of a wei cannot be sent, and rounding up would invent value.

Binary floats are only accepted as the USD price input.
"""
import math
from decimal import (
    Decimal, InvalidOperation, ROUND_DOWN, localcontext, MAX_EMAX, MIN_EMIN
)
from typing import Union

from jeth_sdk.exceptions import DivideByZeroPrice, InvalidAmount, NegativeAmount

WEI_PER_ETHER = 10 ** 18
GWEI_PER_ETHER = 10 ** 9
WEI_PER_GWEI = 10 ** 9

_ETHER_DECIMALS = 18
_GWEI_DECIMALS = 9

# Significant digits kept when dividing by a price
DIVISION_PRECISION = 50

# Largest decimal exponent accepted on input
MAX_EXPONENT = 1000

AmountLike = Union[Decimal, int, str, float]


def to_decimal(amount: AmountLike, name: str = "amount") -> Decimal:
    """
    Convert user input to a finite Decimal.

    Floats go through ``repr`` so ``0.1`` becomes exactly ``Decimal("0.1")``
    rather than its binary approximation.

    Raises:
        InvalidAmount: If the value is not a finite number or its exponent exceeds MAX_EXPONENT
        TypeError: For unsupported types (including bool)
    """
    if isinstance(amount, bool):
        raise TypeError(f"{name} must be a number, got bool")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        if not math.isfinite(amount):
            raise InvalidAmount(f"{name} must be finite, got {amount!r}")
        value = Decimal(repr(amount))
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation:
            raise InvalidAmount(f"{name} is not a number: {amount!r}")
    else:
        raise TypeError(f"{name} must be a Decimal, int, str or float, got {type(amount).__name__}")

    if not value.is_finite():
        raise InvalidAmount(f"{name} must be finite, got {value}")
    if abs(value.adjusted()) > MAX_EXPONENT:
        raise InvalidAmount(f"{name} is out of range: {value}")
    return value


def _non_negative(amount: AmountLike, name: str = "amount") -> Decimal:
    value = to_decimal(amount, name)
    if value < 0:
        raise NegativeAmount(f"{name} must not be negative, got {value}")
    return value


def _base_units(amount: int, name: str = "amount") -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"{name} must be an integer number of wei, got {type(amount).__name__}")
    if amount < 0:
        raise NegativeAmount(f"{name} must not be negative, got {amount}")
    return amount


def _digits(value: Decimal) -> int:
    return max(len(value.as_tuple().digits), 1)


def _shift(value: Decimal, places: int) -> Decimal:
    """Exactly multiply ``value`` by 10**places."""
    with localcontext() as ctx:
        ctx.prec = _digits(value) + 2
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return value.scaleb(places)


def _price(usd_per_ether: float) -> Decimal:
    return to_decimal(usd_per_ether, "usd_per_ether")


# ---------------------------------------------------------------------------
# ether <-> wei
# ---------------------------------------------------------------------------

def fractional_to_base(amount: AmountLike) -> int:
    """
    Convert ether to wei, truncating any fraction of a wei.

    Raises:
        NegativeAmount: If ``amount`` is negative
    """
    return int(_shift(_non_negative(amount), _ETHER_DECIMALS))


def base_to_fractional(amount: int) -> Decimal:
    """
    Convert wei to ether. Exact.

    Raises:
        NegativeAmount: If ``amount`` is negative
    """
    return _shift(Decimal(_base_units(amount)), -_ETHER_DECIMALS)


# ---------------------------------------------------------------------------
# gwei
# ---------------------------------------------------------------------------

def gwei_to_base(amount: AmountLike) -> int:
    """Convert gwei to wei, truncating any fraction of a wei."""
    return int(_shift(_non_negative(amount), _GWEI_DECIMALS))


def base_to_gwei(amount: int) -> Decimal:
    """Convert wei to gwei. Exact."""
    return _shift(Decimal(_base_units(amount)), -_GWEI_DECIMALS)


def fractional_to_gwei(amount: AmountLike) -> Decimal:
    """Convert ether to gwei. Exact."""
    return _shift(_non_negative(amount), _GWEI_DECIMALS)


def gwei_to_fractional(amount: AmountLike) -> Decimal:
    """Convert gwei to ether. Exact."""
    return _shift(_non_negative(amount), -_GWEI_DECIMALS)


# ---------------------------------------------------------------------------
# USD
# ---------------------------------------------------------------------------

def fractional_to_fiat(amount: AmountLike, usd_per_ether: float) -> Decimal:
    """Convert ether to USD at ``usd_per_ether``. Exact."""
    value = _non_negative(amount)
    price = _price(usd_per_ether)
    with localcontext() as ctx:
        ctx.prec = _digits(value) + _digits(price) + 2
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return value * price


def fiat_to_fractional(amount: AmountLike, usd_per_ether: float) -> Decimal:
    """
    Convert USD to ether at ``usd_per_ether``.

    The quotient keeps at least ``DIVISION_PRECISION`` significant digits and
    is truncated, never rounded up.

    Raises:
        DivideByZeroPrice: If the price is zero or negative
    """
    value = _non_negative(amount)
    try:
        price = _price(usd_per_ether)
    except InvalidAmount as e:
        raise DivideByZeroPrice(f"usd_per_ether must be a positive number: {e}") from e
    if price <= 0:
        raise DivideByZeroPrice(f"usd_per_ether must be positive, got {price}")

    with localcontext() as ctx:
        ctx.prec = max(DIVISION_PRECISION, _digits(value) + _ETHER_DECIMALS + 2)
        ctx.rounding = ROUND_DOWN
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return value / price


def base_to_fiat(amount: int, usd_per_ether: float) -> Decimal:
    """Convert wei to USD."""
    return fractional_to_fiat(base_to_fractional(amount), usd_per_ether)


def fiat_to_base(amount: AmountLike, usd_per_ether: float) -> int:
    """
    Convert USD to wei, truncating any fraction of a wei.

    Raises:
        DivideByZeroPrice: If the price is zero or negative
    """
    return fractional_to_base(fiat_to_fractional(amount, usd_per_ether))


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def format_decimal(value: Decimal) -> str:
    """Render a Decimal in plain notation without trailing zeros, e.g. ``0.9895``."""
    with localcontext() as ctx:
        ctx.prec = _digits(value) + 2
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        text = format(value.normalize(), "f")
    return text


# Ethereum-flavoured names
ether_to_wei = fractional_to_base
wei_to_ether = base_to_fractional
ether_to_usd = fractional_to_fiat
usd_to_ether = fiat_to_fractional
wei_to_usd = base_to_fiat
usd_to_wei = fiat_to_base
