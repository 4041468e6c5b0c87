"""
Constants for elliptic curve cryptography.
"""

# SECP256K1 constants
# Order of the SECP256K1 elliptic curve (N value)
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Field prime of the SECP256K1 curve, y^2 = x^3 + 7 (mod P)
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_B = 7

# Minimum private key value for Ethereum (1)
SECP256K1_MIN = 1

# Maximum private key value for Ethereum (N-1)
SECP256K1_MAX = SECP256K1_N - 1

# Sizes of the exchanged key material, in bytes
PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 64
ADDRESS_SIZE = 20

# Sizes of the exchanged key material, in hex characters
PRIVATE_KEY_HEX_LENGTH = PRIVATE_KEY_SIZE * 2
PUBLIC_KEY_HEX_LENGTH = PUBLIC_KEY_SIZE * 2
ADDRESS_HEX_LENGTH = ADDRESS_SIZE * 2
