"""
Tests for the web3-backed ledger gateway and the gateway factory.
"""
import pytest
from unittest.mock import MagicMock, PropertyMock, patch

from jeth_sdk.gateway import get_gateway
from jeth_sdk.gateway.exceptions import GatewayConnectionError, TransmissionFailure
from jeth_sdk.gateway.stub_transport import StubGateway
from jeth_sdk.gateway.transport import check_gateway_url
from jeth_sdk.gateway.web3_transport import Web3Gateway

TEST_RPC_URL = "https://rpc.example.com"
SENDER = "0x19325d2D5c17AF1096D28A12850D27bD182612F6"
TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def mock_w3():
    w3 = MagicMock()
    w3.eth.get_balance.return_value = 2 * 10 ** 18
    w3.eth.gas_price = 500_000_000_000
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.chain_id = 11155111
    w3.eth.send_raw_transaction.return_value = bytes.fromhex(TX_HASH[2:])
    return w3


@pytest.fixture
def gateway(mock_w3):
    return Web3Gateway(TEST_RPC_URL, w3=mock_w3)


class TestCheckGatewayUrl:

    @pytest.mark.parametrize("url", [
        "https://rpc.example.com",
        "http://localhost:8545",
        "http://127.0.0.1:8545",
    ])
    def test_accepted(self, url):
        check_gateway_url(url)

    @pytest.mark.parametrize("url", [
        "http://rpc.example.com",
        "ftp://rpc.example.com",
        "rpc.example.com",
    ])
    def test_rejected(self, url):
        with pytest.raises(ValueError, match="https"):
            check_gateway_url(url)


class TestWeb3Gateway:

    def test_rejects_insecure_url(self, mock_w3):
        with pytest.raises(ValueError):
            Web3Gateway("http://rpc.example.com", w3=mock_w3)

    def test_reads(self, gateway, mock_w3):
        assert gateway.balance_of(SENDER.lower()) == 2 * 10 ** 18
        assert gateway.suggested_gas_unit_price() == 500_000_000_000
        assert gateway.pending_nonce(SENDER) == 7
        assert gateway.chain_identifier() == 11155111

        mock_w3.eth.get_balance.assert_called_once_with(SENDER)
        mock_w3.eth.get_transaction_count.assert_called_once_with(SENDER, "pending")

    def test_broadcast(self, gateway, mock_w3):
        assert gateway.broadcast(b"\x01\x02") == TX_HASH
        mock_w3.eth.send_raw_transaction.assert_called_once_with(b"\x01\x02")

    def test_balance_failure(self, gateway, mock_w3):
        mock_w3.eth.get_balance.side_effect = ConnectionError("connection refused")

        with pytest.raises(GatewayConnectionError, match="Fetching account balance failed"):
            gateway.balance_of(SENDER)

    def test_nonce_failure(self, gateway, mock_w3):
        mock_w3.eth.get_transaction_count.side_effect = TimeoutError("timed out")

        with pytest.raises(GatewayConnectionError, match="pending nonce"):
            gateway.pending_nonce(SENDER)

    def test_gas_price_failure(self, gateway, mock_w3):
        type(mock_w3.eth).gas_price = PropertyMock(side_effect=ConnectionError("down"))

        with pytest.raises(GatewayConnectionError, match="suggested gas price"):
            gateway.suggested_gas_unit_price()

    def test_chain_id_failure(self, gateway, mock_w3):
        type(mock_w3.eth).chain_id = PropertyMock(side_effect=ConnectionError("down"))

        with pytest.raises(GatewayConnectionError, match="chain id"):
            gateway.chain_identifier()

    def test_broadcast_failure(self, gateway, mock_w3):
        mock_w3.eth.send_raw_transaction.side_effect = ValueError("nonce too low")

        with pytest.raises(TransmissionFailure, match="nonce too low"):
            gateway.broadcast(b"\x01")


class TestGetGateway:

    def test_offline(self):
        assert isinstance(get_gateway(offline=True), StubGateway)

    def test_explicit_url(self):
        with patch("jeth_sdk.gateway.web3_transport.Web3") as MockWeb3:
            gateway = get_gateway("http://localhost:8545", timeout=5)

        assert isinstance(gateway, Web3Gateway)
        assert gateway.rpc_url == "http://localhost:8545"
        MockWeb3.HTTPProvider.assert_called_once_with(
            "http://localhost:8545", request_kwargs={"timeout": 5}
        )

    def test_configured_url(self, monkeypatch):
        monkeypatch.setenv("JETH_RPC_URL", "https://node.example.com")
        with patch("jeth_sdk.gateway.web3_transport.Web3"):
            gateway = get_gateway()

        assert gateway.rpc_url == "https://node.example.com"
