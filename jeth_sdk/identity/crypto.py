"""
Cryptographic operations for the identity module.
"""
import logging

import nacl.utils
from eth_keys import keys
from web3 import Web3

from jeth_sdk.exceptions import InvalidPublicPoint, InvalidScalar, RandomSourceFailure
from jeth_sdk.identity.ec_constants import (
    ADDRESS_SIZE, PRIVATE_KEY_SIZE, SECP256K1_B, SECP256K1_MAX, SECP256K1_MIN, SECP256K1_P
)
from jeth_sdk.identity.types import Address, PrivateScalar, PublicPoint

logger = logging.getLogger(__name__)


def random_private_key_bytes() -> bytes:
    """
    Read 32 bytes from the operating system's secure random source.

    Raises:
        RandomSourceFailure: If libsodium could not provide randomness
    """
    try:
        return nacl.utils.random(PRIVATE_KEY_SIZE)
    except Exception as e:
        raise RandomSourceFailure(f"Secure random source unavailable: {e}") from e


def check_scalar_range(value: int) -> None:
    """
    Ensure a private key lies in [1, N-1].

    Raises:
        InvalidScalar: If the value is zero or not below the curve order
    """
    if value < SECP256K1_MIN:
        raise InvalidScalar("private key must not be zero")
    if value > SECP256K1_MAX:
        raise InvalidScalar("private key must be lower than the secp256k1 curve order")


def is_on_curve(point: PublicPoint) -> bool:
    """Check that ``point`` satisfies y^2 = x^3 + 7 over the secp256k1 field."""
    if point.x >= SECP256K1_P or point.y >= SECP256K1_P:
        return False
    return (point.y * point.y - point.x ** 3 - SECP256K1_B) % SECP256K1_P == 0


def public_point_from_scalar(scalar: PrivateScalar) -> PublicPoint:
    """
    Multiply the curve generator by the private key.

    Args:
        scalar: Private key

    Returns:
        Uncompressed public key

    Raises:
        InvalidScalar: If the private key is out of range
    """
    check_scalar_range(scalar.to_int())
    public_key = keys.PrivateKey(scalar.to_bytes()).public_key
    return PublicPoint.from_bytes(public_key.to_bytes())


def address_from_public_point(point: PublicPoint) -> Address:
    """
    Derive an account address: the last 20 bytes of keccak256(x || y).

    Raises:
        InvalidPublicPoint: If the point is the point at infinity or off the curve
    """
    if point.x == 0 and point.y == 0:
        raise InvalidPublicPoint("public key is the point at infinity")
    if not is_on_curve(point):
        raise InvalidPublicPoint(f"public key is not on the secp256k1 curve: {point.to_hex()}")

    digest = Web3.keccak(point.to_bytes())
    address = Address(bytes(digest[-ADDRESS_SIZE:]))
    logger.debug("Derived address %s", address.checksum)
    return address
