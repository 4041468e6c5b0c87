"""
Data types for the identity module.
"""
import hmac
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from web3 import Web3

from jeth_sdk.exceptions import InvalidKeyEncoding, InvalidPublicPoint
from jeth_sdk.identity.ec_constants import (
    ADDRESS_HEX_LENGTH, ADDRESS_SIZE, PRIVATE_KEY_HEX_LENGTH, PRIVATE_KEY_SIZE,
    PUBLIC_KEY_HEX_LENGTH, PUBLIC_KEY_SIZE
)
from jeth_sdk.utils import decode_hex, obfuscate_key

_COORDINATE_SIZE = PUBLIC_KEY_SIZE // 2


class PrivateScalar:
    """
    A secp256k1 private key held in a wipeable buffer.

    The full value is never part of ``repr``/``str``; use :meth:`reveal_hex`
    when it really has to leave the object. Use it as a context manager to
    zero the buffer once the key is no longer needed::

        with PrivateScalar.from_hex(key_hex) as scalar:
            key_pair = derive_from_private_scalar(scalar)
    """
    __slots__ = ("_buffer",)

    def __init__(self, value: bytes):
        if len(value) != PRIVATE_KEY_SIZE:
            raise InvalidKeyEncoding(
                f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(value)}",
                field="private_scalar"
            )
        self._buffer = bytearray(value)

    @classmethod
    def from_int(cls, value: int) -> "PrivateScalar":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"private key must be an int, got {type(value).__name__}")
        if value < 0 or value.bit_length() > PRIVATE_KEY_SIZE * 8:
            raise InvalidKeyEncoding(
                f"private key does not fit in {PRIVATE_KEY_SIZE} bytes", field="private_scalar"
            )
        return cls(value.to_bytes(PRIVATE_KEY_SIZE, "big"))

    @classmethod
    def from_hex(cls, value: str) -> "PrivateScalar":
        return cls(decode_hex(value, PRIVATE_KEY_HEX_LENGTH, "private key", secret=True))

    def to_int(self) -> int:
        return int.from_bytes(self._buffer, "big")

    def to_bytes(self) -> bytes:
        """Return a copy of the raw 32-byte key."""
        return bytes(self._buffer)

    def reveal_hex(self) -> str:
        """Return the full private key as 64 lowercase hex characters."""
        return self._buffer.hex()

    def masked(self) -> str:
        return obfuscate_key(self.reveal_hex())

    def copy(self) -> "PrivateScalar":
        """Return an equal scalar backed by its own buffer."""
        return PrivateScalar(bytes(self._buffer))

    def wipe(self) -> None:
        """Overwrite the key material with zeros."""
        for i in range(len(self._buffer)):
            self._buffer[i] = 0

    @property
    def wiped(self) -> bool:
        return not any(self._buffer)

    def __enter__(self) -> "PrivateScalar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrivateScalar):
            return NotImplemented
        return hmac.compare_digest(bytes(self._buffer), bytes(other._buffer))

    __hash__ = None

    def __repr__(self) -> str:
        return f"PrivateScalar({self.masked()})"

    __str__ = __repr__


@dataclass(frozen=True)
class PublicPoint:
    """
    An uncompressed secp256k1 public key.

    Exchanged as 64 bytes (x || y, big endian) without the ``0x04`` prefix.
    """
    x: int
    y: int

    def __post_init__(self):
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"public key coordinate {name} must be an int")
            if value < 0 or value.bit_length() > _COORDINATE_SIZE * 8:
                raise InvalidPublicPoint(
                    f"public key coordinate {name} does not fit in {_COORDINATE_SIZE} bytes"
                )

    @classmethod
    def from_bytes(cls, value: bytes) -> "PublicPoint":
        if len(value) == PUBLIC_KEY_SIZE + 1 and value[0] == 0x04:
            value = value[1:]
        if len(value) != PUBLIC_KEY_SIZE:
            raise InvalidKeyEncoding(
                f"public key must be {PUBLIC_KEY_SIZE} bytes, got {len(value)}",
                field="public_point"
            )
        return cls(
            x=int.from_bytes(value[:_COORDINATE_SIZE], "big"),
            y=int.from_bytes(value[_COORDINATE_SIZE:], "big")
        )

    @classmethod
    def from_hex(cls, value: str) -> "PublicPoint":
        return cls.from_bytes(decode_hex(value, PUBLIC_KEY_HEX_LENGTH, "public key"))

    def to_bytes(self) -> bytes:
        return self.x.to_bytes(_COORDINATE_SIZE, "big") + self.y.to_bytes(_COORDINATE_SIZE, "big")

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class Address:
    """A 20-byte account address."""
    value: bytes

    def __post_init__(self):
        if not isinstance(self.value, (bytes, bytearray)) or len(self.value) != ADDRESS_SIZE:
            raise InvalidKeyEncoding(f"address must be {ADDRESS_SIZE} bytes", field="address")
        object.__setattr__(self, "value", bytes(self.value))

    @classmethod
    def from_hex(cls, value: str) -> "Address":
        return cls(decode_hex(value, ADDRESS_HEX_LENGTH, "address"))

    def to_hex(self) -> str:
        """Lowercase hex without the ``0x`` marker."""
        return self.value.hex()

    @property
    def checksum(self) -> str:
        """EIP-55 mixed-case display form, ``0x`` prefixed."""
        return Web3.to_checksum_address("0x" + self.value.hex())

    def __str__(self) -> str:
        return self.checksum


class FieldMismatch(NamedTuple):
    """A single diverging field between two key pairs."""
    field: str
    expected: str
    actual: str


@dataclass(frozen=True, eq=False)
class KeyPair:
    """
    An Ethereum key pair: private key, derived public key and derived address.

    A KeyPair is only trustworthy once :func:`jeth_sdk.identity.validate`
    has accepted it; one built with ``construct`` may hold inconsistent data.

    Attributes:
        private_scalar: Secret key
        public_point: Public key derived from the private key
        address: Address derived from the public key
    """
    private_scalar: PrivateScalar
    public_point: PublicPoint
    address: Address

    def private_key_hex(self) -> str:
        return self.private_scalar.reveal_hex()

    def public_key_hex(self) -> str:
        return self.public_point.to_hex()

    def address_hex(self) -> str:
        return self.address.to_hex()

    @property
    def checksum_address(self) -> str:
        return self.address.checksum

    def differences(self, other: "KeyPair") -> List[FieldMismatch]:
        """
        Compare field by field against ``other``.

        ``other`` is treated as the expected side. Private keys are masked
        in the result.

        Returns:
            Diverging fields in order: private_scalar, public_point, address
        """
        mismatches = []
        if self.private_scalar != other.private_scalar:
            mismatches.append(FieldMismatch(
                "private_scalar", other.private_scalar.masked(), self.private_scalar.masked()
            ))
        if self.public_point != other.public_point:
            mismatches.append(FieldMismatch(
                "public_point", other.public_point.to_hex(), self.public_point.to_hex()
            ))
        if self.address != other.address:
            mismatches.append(FieldMismatch(
                "address", other.address.checksum, self.address.checksum
            ))
        return mismatches

    def first_difference(self, other: "KeyPair") -> Optional[FieldMismatch]:
        mismatches = self.differences(other)
        return mismatches[0] if mismatches else None

    def clone(self) -> "KeyPair":
        """Deep copy; the clone gets its own private key buffer."""
        return KeyPair(
            private_scalar=self.private_scalar.copy(),
            public_point=self.public_point,
            address=self.address
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return not self.differences(other)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"KeyPair(private_scalar={self.private_scalar.masked()}, "
            f"public_point={self.public_point.to_hex()}, address={self.address.checksum})"
        )
