"""
Key pair self-check.

A tampered or corrupted key pair looks exactly like a good one: same field
sizes, same encodings. The only reliable check is to re-derive everything
from the private key and compare it with what was stored.
"""
import logging
from typing import Optional

from jeth_sdk.exceptions import IdentityError, IdentityMismatch
from jeth_sdk.identity.derivation import derive_from_private_scalar
from jeth_sdk.identity.types import FieldMismatch, KeyPair

logger = logging.getLogger(__name__)


def compare(key_pair: KeyPair, expected: KeyPair) -> Optional[FieldMismatch]:
    """
    Structurally compare two key pairs.

    Returns:
        The first diverging field with both values, or None if they are equal
    """
    return key_pair.first_difference(expected)


def equals(a: KeyPair, b: KeyPair) -> bool:
    """Check whether two key pairs hold the same private key, public key and address."""
    return compare(a, b) is None


def clone(key_pair: KeyPair) -> KeyPair:
    """Deep copy ``key_pair``; the copy does not share the private key buffer."""
    return key_pair.clone()


def validate(key_pair: KeyPair) -> None:
    """
    Check that ``key_pair`` is what its private key derives to.

    Re-derives a fresh key pair from the stored private key and compares
    all three fields against the original.

    Raises:
        IdentityMismatch: With the first diverging field (all diverging
            fields are listed in ``.fields``)
        InvalidScalar: If the stored private key is out of range
    """
    derived = derive_from_private_scalar(key_pair.private_scalar)
    mismatches = key_pair.differences(derived)
    if not mismatches:
        logger.debug("Key pair for %s validated", key_pair.checksum_address)
        return

    first = mismatches[0]
    logger.warning(
        "Key pair for %s failed validation on %s",
        key_pair.checksum_address, ", ".join(m.field for m in mismatches)
    )
    raise IdentityMismatch(
        field=first.field,
        expected=first.expected,
        actual=first.actual,
        fields=[m.field for m in mismatches]
    )


def is_valid(key_pair: KeyPair) -> bool:
    """Return True when :func:`validate` accepts ``key_pair``."""
    try:
        validate(key_pair)
    except IdentityError:
        return False
    return True
