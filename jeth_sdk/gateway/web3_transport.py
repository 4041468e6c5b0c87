"""
JSON-RPC gateway backed by web3.py.
"""
import logging
from typing import Optional

from web3 import Web3

from .exceptions import GatewayConnectionError, TransmissionFailure
from .transport import AddressLike, LedgerGateway, address_text, check_gateway_url

logger = logging.getLogger(__name__)


class Web3Gateway(LedgerGateway):
    """
    Ledger gateway talking to an Ethereum node over HTTP JSON-RPC.

    Args:
        rpc_url: Node endpoint, e.g. "https://cloudflare-eth.com"
        timeout: HTTP timeout in seconds
        w3: Preconfigured Web3 instance (mainly for tests)
        logger: Optional logger instance
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: int = 30,
        w3: Optional[Web3] = None,
        logger: Optional[logging.Logger] = None
    ):
        check_gateway_url(rpc_url)
        self.rpc_url = rpc_url
        self.logger = logger or logging.getLogger(__name__)
        self.w3 = w3 or Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))

    def balance_of(self, address: AddressLike) -> int:
        account = address_text(address)
        try:
            balance = self.w3.eth.get_balance(account)
        except Exception as e:
            self.logger.error(f"Failed to fetch balance of {account}: {e}")
            raise GatewayConnectionError(f"Fetching account balance failed: {str(e)}") from e
        self.logger.debug(f"Balance of {account}: {balance} wei")
        return int(balance)

    def suggested_gas_unit_price(self) -> int:
        try:
            gas_price = self.w3.eth.gas_price
        except Exception as e:
            self.logger.error(f"Failed to fetch suggested gas price: {e}")
            raise GatewayConnectionError(f"Getting suggested gas price failed: {str(e)}") from e
        return int(gas_price)

    def pending_nonce(self, address: AddressLike) -> int:
        account = address_text(address)
        try:
            nonce = self.w3.eth.get_transaction_count(account, "pending")
        except Exception as e:
            self.logger.error(f"Failed to fetch pending nonce of {account}: {e}")
            raise GatewayConnectionError(
                f"Fetching latest pending nonce for \"{account}\" failed: {str(e)}"
            ) from e
        return int(nonce)

    def chain_identifier(self) -> int:
        try:
            chain_id = self.w3.eth.chain_id
        except Exception as e:
            self.logger.error(f"Failed to fetch chain id: {e}")
            raise GatewayConnectionError(f"Getting chain id failed: {str(e)}") from e
        return int(chain_id)

    def broadcast(self, signed_transaction: bytes) -> str:
        try:
            tx_hash = self.w3.eth.send_raw_transaction(signed_transaction)
        except Exception as e:
            self.logger.error(f"Failed to send transaction: {e}")
            raise TransmissionFailure(f"Sending transaction failed: {str(e)}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        self.logger.info(f"Transaction sent: {tx_hash_hex}")
        return tx_hash_hex
