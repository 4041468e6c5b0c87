"""
Pytest fixtures for the jeth SDK tests.
"""
import pytest

from jeth_sdk import identity
from jeth_sdk.config import NetworkConfig
from jeth_sdk.gateway.stub_transport import StubGateway
from jeth_sdk.price import StaticPriceSource

# Known-good wallet
PRIVATE_KEY_HEX = "7cd7d434407526ad4c7a64d4f7d26a2a45bb0da1cc7406c166e1e3ddfcce03ed"
PUBLIC_KEY_HEX = (
    "ac7a41fcbb11cb057a1f0bf1710e7f0aab1c93a468c54f7472695b5b97c1af68"
    "7b8a0692b1d37ff1d5e65d2ecd2f6befdf7d0c89a403a5bbafcd4a9143bb9de7"
)
ADDRESS = "0x19325d2D5c17AF1096D28A12850D27bD182612F6"

# Private key 1: the public key is the curve generator
GENERATOR_X = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GENERATOR_Y = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
GENERATOR_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"

RECEIVER = GENERATOR_ADDRESS
USD_PER_ETHER = 1536.31
GAS_PRICE_WEI = 500_000_000_000


@pytest.fixture(autouse=True)
def _reset_network_cache():
    NetworkConfig._networks_cache = None
    yield
    NetworkConfig._networks_cache = None


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("JETH_NETWORK", "JETH_RPC_URL", "JETH_PRICE_URL", "JETH_PRIVATE_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def key_pair():
    """Key pair derived from the known-good private key"""
    return identity.from_private_key_hex(PRIVATE_KEY_HEX)


@pytest.fixture
def stub_gateway():
    return StubGateway(
        balances={ADDRESS: 2 * 10 ** 18},
        gas_price=GAS_PRICE_WEI,
        chain_id=1,
        nonces={ADDRESS: 7}
    )


@pytest.fixture
def price_source():
    return StaticPriceSource(USD_PER_ETHER)
