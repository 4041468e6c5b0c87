"""
Tests for utility functions.
"""
import pytest

from jeth_sdk.exceptions import InvalidKeyEncoding
from jeth_sdk.utils import decode_hex, obfuscate_key, strip_hex_prefix


def test_obfuscate_key():
    assert obfuscate_key("7cd7d434") == "****d434"
    assert obfuscate_key("abcd") == "****"
    assert obfuscate_key("") == ""
    assert obfuscate_key("abcdef", visible=2) == "****ef"


def test_strip_hex_prefix():
    assert strip_hex_prefix("0xabc") == "abc"
    assert strip_hex_prefix("0Xabc") == "abc"
    assert strip_hex_prefix("abc") == "abc"


def test_decode_hex():
    assert decode_hex("0x00ff", 4, "value") == b"\x00\xff"
    assert decode_hex("  00FF\n", 4, "value") == b"\x00\xff"


def test_decode_hex_wrong_length():
    with pytest.raises(InvalidKeyEncoding, match="value must be 4 hex characters, got 6") as exc_info:
        decode_hex("00ff00", 4, "value")
    assert exc_info.value.field == "value"


def test_decode_hex_not_hex():
    with pytest.raises(InvalidKeyEncoding, match="not valid hex"):
        decode_hex("00fg", 4, "value")


def test_decode_hex_not_a_string():
    with pytest.raises(InvalidKeyEncoding, match="must be a hex string"):
        decode_hex(b"00ff", 4, "value")


def test_decode_hex_masks_secrets():
    secret = "1234567890"
    with pytest.raises(InvalidKeyEncoding) as exc_info:
        decode_hex(secret, 4, "private key", secret=True)
    assert secret not in str(exc_info.value)
    assert "7890" in str(exc_info.value)
