"""
Utility functions for the jeth SDK.
"""
import string

from .exceptions import InvalidKeyEncoding

_HEX_DIGITS = frozenset(string.hexdigits)


def obfuscate_key(key: str, visible: int = 4) -> str:
    """
    Mask a secret so it can be printed or logged.

    Every character except the last ``visible`` ones is replaced with ``*``.

    Args:
        key: Secret string (typically a hex private key)
        visible: Number of trailing characters left readable

    Returns:
        Masked string of the same length
    """
    if len(key) <= visible:
        return "*" * len(key)
    return "*" * (len(key) - visible) + key[-visible:]


def strip_hex_prefix(value: str) -> str:
    """Remove a leading ``0x``/``0X`` marker if present."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def decode_hex(value: str, length: int, field: str, secret: bool = False) -> bytes:
    """
    Decode a fixed-length hex string.

    Args:
        value: Hex string, with or without ``0x`` prefix
        length: Expected number of hex characters (prefix excluded)
        field: Name of the field, used in error messages
        secret: Mask the value in error messages

    Returns:
        Decoded bytes

    Raises:
        InvalidKeyEncoding: If the value is not a string of exactly ``length`` hex characters
    """
    if not isinstance(value, str):
        raise InvalidKeyEncoding(
            f"{field} must be a hex string, got {type(value).__name__}", field=field
        )

    body = strip_hex_prefix(value.strip())
    shown = obfuscate_key(body) if secret else body

    if len(body) != length:
        raise InvalidKeyEncoding(
            f"{field} must be {length} hex characters, got {len(body)}: \"{shown}\"",
            field=field
        )
    if not set(body) <= _HEX_DIGITS:
        raise InvalidKeyEncoding(f"{field} is not valid hex: \"{shown}\"", field=field)

    return bytes.fromhex(body)
