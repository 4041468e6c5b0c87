"""
Property-based tests for the jeth SDK.

These tests verify that properties hold true across many random inputs.
"""
from decimal import Decimal, localcontext

from hypothesis import given, settings, strategies as st

from jeth_sdk import identity
from jeth_sdk.accounting import units
from jeth_sdk.accounting.gas import compute_gas_cost, net_of_gas
from jeth_sdk.identity.crypto import is_on_curve
from jeth_sdk.identity.ec_constants import SECP256K1_N

wei_strategy = st.integers(min_value=0, max_value=10 ** 60)
ether_strategy = st.decimals(
    min_value=0, max_value=10 ** 12, places=18, allow_nan=False, allow_infinity=False
)
scalar_strategy = st.integers(min_value=1, max_value=SECP256K1_N - 1)


@given(wei=wei_strategy)
def test_wei_survives_ether_round_trip(wei):
    assert units.fractional_to_base(units.base_to_fractional(wei)) == wei


@given(amount=ether_strategy)
def test_ether_with_eighteen_places_is_exact(amount):
    wei = units.fractional_to_base(amount)
    assert units.base_to_fractional(wei) == amount


@given(amount=st.decimals(min_value=0, max_value=10 ** 6, places=30))
def test_conversion_never_rounds_up(amount):
    wei = units.fractional_to_base(amount)
    with localcontext() as ctx:
        ctx.prec = 100
        scaled = amount * 10 ** 18
    assert Decimal(wei) <= scaled < Decimal(wei + 1)


@given(
    requested=st.integers(min_value=1, max_value=10 ** 24),
    price=st.integers(min_value=0, max_value=10 ** 12),
    limit=st.integers(min_value=1, max_value=10 ** 7)
)
def test_net_plus_gas_is_requested(requested, price, limit):
    gas_cost = compute_gas_cost(price, limit)
    if gas_cost >= requested:
        return
    assert net_of_gas(requested, gas_cost) + gas_cost == requested


@settings(max_examples=25, deadline=None)
@given(scalar=scalar_strategy)
def test_derived_key_pairs_validate(scalar):
    key_pair = identity.derive_from_private_scalar(scalar)
    assert is_on_curve(key_pair.public_point)
    identity.validate(key_pair)


@settings(max_examples=25, deadline=None)
@given(scalar=scalar_strategy)
def test_rehydrated_key_pairs_validate(scalar):
    key_pair = identity.derive_from_private_scalar(scalar)
    stored = identity.construct_hex(
        key_pair.private_key_hex(), key_pair.public_key_hex(), key_pair.checksum_address
    )
    assert identity.equals(stored, key_pair)
    identity.validate(stored)
