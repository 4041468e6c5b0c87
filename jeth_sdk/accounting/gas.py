"""
Gas cost computation and netting.

The sender pays gas out of the amount they asked to send: the receiver gets
``requested - unit_price * unit_limit`` wei. All of it is integer arithmetic.
"""
from dataclasses import dataclass

from jeth_sdk.exceptions import InsufficientAmountForGas, InvalidGasParameters

# Gas used by a plain value transfer
DEFAULT_GAS_LIMIT = 21000


def _integer(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGasParameters(f"{name} must be an integer, got {type(value).__name__}")
    return value


def compute_gas_cost(unit_price: int, unit_limit: int) -> int:
    """
    Total gas cost in wei.

    Args:
        unit_price: Wei per unit of gas
        unit_limit: Units of gas the transaction may use

    Raises:
        InvalidGasParameters: If either value is negative or the limit is zero
    """
    unit_price = _integer(unit_price, "gas price")
    unit_limit = _integer(unit_limit, "gas limit")
    if unit_price < 0:
        raise InvalidGasParameters(f"gas price must not be negative, got {unit_price}")
    if unit_limit < 0:
        raise InvalidGasParameters(f"gas limit must not be negative, got {unit_limit}")
    if unit_limit == 0:
        raise InvalidGasParameters("gas limit must not be zero")
    return unit_price * unit_limit


def net_of_gas(requested_amount: int, gas_cost: int) -> int:
    """
    Amount left for the receiver once gas is paid, in wei.

    A payment that gas would consume entirely is rejected rather than
    clamped to zero.

    Raises:
        InsufficientAmountForGas: If ``gas_cost >= requested_amount``
        InvalidGasParameters: If ``gas_cost`` is negative
    """
    requested_amount = _integer(requested_amount, "requested amount")
    gas_cost = _integer(gas_cost, "gas cost")
    if gas_cost < 0:
        raise InvalidGasParameters(f"gas cost must not be negative, got {gas_cost}")
    if gas_cost >= requested_amount:
        raise InsufficientAmountForGas(
            f"gas cost of {gas_cost} wei consumes the whole requested amount of "
            f"{requested_amount} wei",
            requested=requested_amount,
            gas_cost=gas_cost
        )
    return requested_amount - gas_cost


def gas_proportion(gas_cost: int, requested_amount: int) -> float:
    """
    Share of the requested amount consumed by gas, for display only.

    Raises:
        InsufficientAmountForGas: If the requested amount is not positive
    """
    requested_amount = _integer(requested_amount, "requested amount")
    gas_cost = _integer(gas_cost, "gas cost")
    if requested_amount <= 0:
        raise InsufficientAmountForGas(
            f"requested amount must be positive, got {requested_amount}",
            requested=requested_amount,
            gas_cost=gas_cost
        )
    return gas_cost / requested_amount


@dataclass(frozen=True)
class TransactionCost:
    """Gas parameters of one transaction."""
    unit_price: int
    unit_limit: int = DEFAULT_GAS_LIMIT

    def __post_init__(self):
        compute_gas_cost(self.unit_price, self.unit_limit)

    @property
    def total(self) -> int:
        return compute_gas_cost(self.unit_price, self.unit_limit)

    def net(self, requested_amount: int) -> int:
        return net_of_gas(requested_amount, self.total)

    def proportion(self, requested_amount: int) -> float:
        return gas_proportion(self.total, requested_amount)
