"""
Tests for the in-memory StubGateway.
"""
import pytest
from web3 import Web3

from jeth_sdk.gateway.exceptions import GatewayConnectionError, TransmissionFailure
from jeth_sdk.gateway.stub_transport import StubGateway
from jeth_sdk.identity.types import Address

SENDER = "0x19325d2D5c17AF1096D28A12850D27bD182612F6"


class TestStubGateway:
    """Tests for the StubGateway implementation."""

    def test_defaults(self):
        gateway = StubGateway()
        assert gateway.balance_of(SENDER) == 0
        assert gateway.pending_nonce(SENDER) == 0
        assert gateway.suggested_gas_unit_price() == 1_000_000_000
        assert gateway.chain_identifier() == 1

    def test_state_is_keyed_by_address(self):
        gateway = StubGateway(balances={SENDER.lower(): 5}, nonces={SENDER: 3})

        assert gateway.balance_of(SENDER) == 5
        assert gateway.balance_of(Address.from_hex(SENDER)) == 5
        assert gateway.pending_nonce(SENDER.lower()) == 3

    def test_broadcast_records_transaction(self):
        gateway = StubGateway()

        tx_hash = gateway.broadcast(b"\x01\x02")

        assert gateway.sent == [b"\x01\x02"]
        assert tx_hash == Web3.to_hex(Web3.keccak(b"\x01\x02"))

    def test_broadcast_failure(self):
        gateway = StubGateway(fail_broadcast=True)

        with pytest.raises(TransmissionFailure):
            gateway.broadcast(b"\x01")
        assert gateway.sent == []

    def test_closed_gateway(self):
        gateway = StubGateway()
        gateway.close()

        with pytest.raises(GatewayConnectionError):
            gateway.balance_of(SENDER)
        with pytest.raises(GatewayConnectionError):
            gateway.broadcast(b"\x01")
