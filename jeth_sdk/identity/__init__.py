"""
Identity module for the jeth SDK.

This module handles Ethereum key pair generation, derivation of public keys
and addresses from private keys, and the self-check that proves a stored
key pair is internally consistent.
"""
from jeth_sdk.identity.derivation import (
    construct, construct_hex, derive_address_from_public_point,
    derive_from_private_scalar, derive_from_public_point,
    from_private_key_hex, from_public_key_hex, generate
)
from jeth_sdk.identity.types import Address, FieldMismatch, KeyPair, PrivateScalar, PublicPoint
from jeth_sdk.identity.validation import clone, compare, equals, is_valid, validate

__all__ = [
    'generate',
    'derive_from_private_scalar',
    'derive_from_public_point',
    'derive_address_from_public_point',
    'construct',
    'construct_hex',
    'from_private_key_hex',
    'from_public_key_hex',
    'validate',
    'is_valid',
    'equals',
    'compare',
    'clone',
    'KeyPair',
    'PrivateScalar',
    'PublicPoint',
    'Address',
    'FieldMismatch',
]
