"""
Payment quotes: what the receiver gets once gas is taken out.
"""
import logging
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from jeth_sdk.accounting.gas import compute_gas_cost, gas_proportion, net_of_gas
from jeth_sdk.accounting.units import (
    AmountLike, base_to_fiat, base_to_fractional, format_decimal,
    fractional_to_base, fractional_to_fiat, to_decimal
)

logger = logging.getLogger(__name__)


class PaymentQuote(BaseModel):
    """
    Breakdown of an outgoing payment.

    ``net_wei`` is the value that goes into the transaction. The USD
    figures and ``gas_proportion`` are informational.
    """
    model_config = ConfigDict(frozen=True)

    requested_ether: Decimal
    requested_wei: int
    gas_unit_price: int
    gas_unit_limit: int
    gas_cost_wei: int
    net_wei: int
    usd_per_ether: float
    gas_proportion: float

    @property
    def net_ether(self) -> Decimal:
        return base_to_fractional(self.net_wei)

    @property
    def gas_cost_ether(self) -> Decimal:
        return base_to_fractional(self.gas_cost_wei)

    @property
    def requested_usd(self) -> Decimal:
        return fractional_to_fiat(self.requested_ether, self.usd_per_ether)

    @property
    def gas_cost_usd(self) -> Decimal:
        return base_to_fiat(self.gas_cost_wei, self.usd_per_ether)

    @property
    def net_usd(self) -> Decimal:
        return base_to_fiat(self.net_wei, self.usd_per_ether)

    def summary(self, sender: str, receiver: str) -> str:
        """Human readable summary shown before a payment is confirmed."""
        return (
            f"ORIGINAL AMOUNT SENDING: {format_decimal(self.requested_ether)} ether "
            f"(${self.requested_usd:.2f})\n"
            f"GAS: {self.gas_unit_price} wei price * {self.gas_unit_limit} limit = "
            f"{self.gas_cost_wei} wei ({format_decimal(self.gas_cost_ether)} ether, "
            f"${self.gas_cost_usd:.2f})\n"
            f"GAS ADJUSTED AMOUNT SENDING: {format_decimal(self.net_ether)} ether "
            f"(${self.net_usd:.2f}) [down {self.gas_proportion * 100:.3f}%]\n"
            f"FROM:\t{sender}\n"
            f"TO:\t{receiver}\n"
        )


def build_payment_quote(
    amount_ether: AmountLike,
    gas_unit_price: int,
    gas_unit_limit: int,
    usd_per_ether: float
) -> PaymentQuote:
    """
    Work out the exact wei to transmit for a requested ether amount.

    Args:
        amount_ether: Amount the sender wants to part with, gas included
        gas_unit_price: Wei per unit of gas
        gas_unit_limit: Units of gas
        usd_per_ether: Price used for the USD figures

    Raises:
        NegativeAmount: If the amount is negative
        InvalidGasParameters: If the gas parameters are out of range
        InsufficientAmountForGas: If gas would consume the whole amount
    """
    requested_ether = to_decimal(amount_ether)
    requested_wei = fractional_to_base(requested_ether)
    gas_cost_wei = compute_gas_cost(gas_unit_price, gas_unit_limit)
    net_wei = net_of_gas(requested_wei, gas_cost_wei)

    quote = PaymentQuote(
        requested_ether=requested_ether,
        requested_wei=requested_wei,
        gas_unit_price=gas_unit_price,
        gas_unit_limit=gas_unit_limit,
        gas_cost_wei=gas_cost_wei,
        net_wei=net_wei,
        usd_per_ether=usd_per_ether,
        gas_proportion=gas_proportion(gas_cost_wei, requested_wei)
    )
    logger.debug(
        "Quoted %s wei requested, %s wei gas, %s wei net",
        requested_wei, gas_cost_wei, net_wei
    )
    return quote
