"""
Key pair generation, derivation and rehydration.
"""
import logging
import time
from typing import Callable, Optional, Union

from jeth_sdk.exceptions import InvalidScalar, RandomSourceFailure
from jeth_sdk.identity.crypto import (
    address_from_public_point, check_scalar_range, public_point_from_scalar,
    random_private_key_bytes
)
from jeth_sdk.identity.ec_constants import PRIVATE_KEY_SIZE
from jeth_sdk.identity.types import Address, KeyPair, PrivateScalar, PublicPoint

logger = logging.getLogger(__name__)

ScalarLike = Union[PrivateScalar, int, bytes, str]

# Probability of a single rejection is about 2**-128
_MAX_GENERATION_ATTEMPTS = 16


def _as_scalar(scalar: ScalarLike) -> PrivateScalar:
    """Turn any accepted private key representation into a fresh PrivateScalar."""
    if isinstance(scalar, PrivateScalar):
        return scalar.copy()
    if isinstance(scalar, bool):
        raise TypeError("private key must not be a bool")
    if isinstance(scalar, int):
        if scalar <= 0:
            raise InvalidScalar("private key must be positive")
        check_scalar_range(scalar)
        return PrivateScalar.from_int(scalar)
    if isinstance(scalar, (bytes, bytearray)):
        return PrivateScalar(bytes(scalar))
    if isinstance(scalar, str):
        return PrivateScalar.from_hex(scalar)
    raise TypeError(f"unsupported private key type: {type(scalar).__name__}")


def generate(random_source: Optional[Callable[[int], bytes]] = None) -> KeyPair:
    """
    Create a new key pair from a randomly generated private key.

    Args:
        random_source: Callable returning ``n`` secure random bytes;
            defaults to libsodium's ``randombytes``

    Returns:
        Freshly derived KeyPair

    Raises:
        RandomSourceFailure: If secure randomness is unavailable
    """
    start_time = time.time()
    read = random_source or (lambda _n: random_private_key_bytes())

    for _ in range(_MAX_GENERATION_ATTEMPTS):
        try:
            candidate = read(PRIVATE_KEY_SIZE)
        except RandomSourceFailure:
            raise
        except Exception as e:
            raise RandomSourceFailure(f"Secure random source failed: {e}") from e

        if not isinstance(candidate, (bytes, bytearray)) or len(candidate) != PRIVATE_KEY_SIZE:
            raise RandomSourceFailure(
                f"Secure random source returned an invalid value, expected {PRIVATE_KEY_SIZE} bytes"
            )

        with PrivateScalar(bytes(candidate)) as scalar:
            try:
                key_pair = derive_from_private_scalar(scalar)
            except InvalidScalar:
                logger.debug("Rejected out-of-range private key sample, retrying")
                continue

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug("Generated key pair for %s in %.2f ms", key_pair.checksum_address, elapsed_ms)
        return key_pair

    raise RandomSourceFailure(
        f"Secure random source produced no usable private key in {_MAX_GENERATION_ATTEMPTS} attempts"
    )


def derive_from_private_scalar(scalar: ScalarLike) -> KeyPair:
    """
    Derive the public key and address from a private key.

    The returned KeyPair owns a copy of the private key, so wiping the
    argument afterwards does not affect it.

    Args:
        scalar: PrivateScalar, int, 32 raw bytes or 64-char hex string

    Returns:
        KeyPair satisfying the derivation invariant

    Raises:
        InvalidScalar: If the private key is zero or not below the curve order
        InvalidKeyEncoding: If bytes/hex input has the wrong length
    """
    with _as_scalar(scalar) as private_scalar:
        public_point = public_point_from_scalar(private_scalar)
        return derive_from_public_point(private_scalar, public_point)


def derive_from_public_point(private_scalar: ScalarLike, public_point: PublicPoint) -> KeyPair:
    """
    Build a KeyPair by deriving only the address from a given public key.

    The public key is trusted as given; use :func:`validate` to check it
    really belongs to the private key.
    """
    return KeyPair(
        private_scalar=_as_scalar(private_scalar),
        public_point=public_point,
        address=derive_address_from_public_point(public_point)
    )


def derive_address_from_public_point(point: PublicPoint) -> Address:
    """
    Derive the account address for a public key.

    Raises:
        InvalidPublicPoint: If the point is the point at infinity or off the curve
    """
    return address_from_public_point(point)


def construct(private_scalar: PrivateScalar, public_point: PublicPoint, address: Address) -> KeyPair:
    """
    Assemble a KeyPair from already-typed parts without deriving or checking anything.

    Validate the result before spending from it.
    """
    return KeyPair(private_scalar=private_scalar.copy(), public_point=public_point, address=address)


def construct_hex(private_key_hex: str, public_key_hex: str, address_hex: str) -> KeyPair:
    """
    Rehydrate a KeyPair from stored hex strings.

    Only the encodings are checked (64/128/40 hex characters, ``0x``
    prefixes tolerated); no derivation happens.

    Raises:
        InvalidKeyEncoding: If any string has the wrong length or is not hex
    """
    return KeyPair(
        private_scalar=PrivateScalar.from_hex(private_key_hex),
        public_point=PublicPoint.from_hex(public_key_hex),
        address=Address.from_hex(address_hex)
    )


def from_private_key_hex(private_key_hex: str) -> KeyPair:
    """Parse a hex private key and derive the rest of the key pair."""
    with PrivateScalar.from_hex(private_key_hex) as scalar:
        return derive_from_private_scalar(scalar)


def from_public_key_hex(private_key_hex: str, public_key_hex: str) -> KeyPair:
    """Parse hex private and public keys and derive only the address."""
    with PrivateScalar.from_hex(private_key_hex) as scalar:
        return derive_from_public_point(scalar, PublicPoint.from_hex(public_key_hex))
