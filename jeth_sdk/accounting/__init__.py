"""
Value accounting for the jeth SDK.

Exact conversion between wei, gwei, ether and USD, and gas netting for
outgoing payments.
"""
from jeth_sdk.accounting.amount import MonetaryAmount
from jeth_sdk.accounting.gas import (
    DEFAULT_GAS_LIMIT, TransactionCost, compute_gas_cost, gas_proportion, net_of_gas
)
from jeth_sdk.accounting.quote import PaymentQuote, build_payment_quote
from jeth_sdk.accounting.units import (
    GWEI_PER_ETHER, WEI_PER_ETHER, WEI_PER_GWEI,
    base_to_fiat, base_to_fractional, base_to_gwei, ether_to_usd, ether_to_wei,
    fiat_to_base, fiat_to_fractional, format_decimal, fractional_to_base,
    fractional_to_fiat, fractional_to_gwei, gwei_to_base, gwei_to_fractional,
    to_decimal, usd_to_ether, usd_to_wei, wei_to_ether, wei_to_usd
)

__all__ = [
    'WEI_PER_ETHER',
    'GWEI_PER_ETHER',
    'WEI_PER_GWEI',
    'DEFAULT_GAS_LIMIT',
    'fractional_to_base',
    'base_to_fractional',
    'fractional_to_fiat',
    'fiat_to_fractional',
    'base_to_fiat',
    'fiat_to_base',
    'gwei_to_base',
    'base_to_gwei',
    'fractional_to_gwei',
    'gwei_to_fractional',
    'ether_to_wei',
    'wei_to_ether',
    'ether_to_usd',
    'usd_to_ether',
    'wei_to_usd',
    'usd_to_wei',
    'to_decimal',
    'format_decimal',
    'compute_gas_cost',
    'net_of_gas',
    'gas_proportion',
    'TransactionCost',
    'MonetaryAmount',
    'PaymentQuote',
    'build_payment_quote',
]
