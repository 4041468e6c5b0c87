"""
In-memory gateway.

Used for dry runs and tests: nothing leaves the process, and broadcast
transactions are only recorded.
"""
import logging
from typing import Dict, List, Optional

from web3 import Web3

from .exceptions import GatewayConnectionError, TransmissionFailure
from .transport import AddressLike, LedgerGateway, address_text

logger = logging.getLogger(__name__)


class StubGateway(LedgerGateway):
    """
    A ledger gateway that keeps its whole state in memory.

    Args:
        balances: Initial balances in wei, keyed by address
        gas_price: Suggested gas price in wei
        chain_id: Chain id to report (1 is mainnet)
        nonces: Initial pending nonces, keyed by address
        fail_broadcast: Reject every broadcast with TransmissionFailure
    """

    def __init__(
        self,
        balances: Optional[Dict[str, int]] = None,
        gas_price: int = 1_000_000_000,
        chain_id: int = 1,
        nonces: Optional[Dict[str, int]] = None,
        fail_broadcast: bool = False
    ):
        self.balances = {address_text(a): v for a, v in (balances or {}).items()}
        self.nonces = {address_text(a): v for a, v in (nonces or {}).items()}
        self.gas_price = gas_price
        self.chain_id = chain_id
        self.fail_broadcast = fail_broadcast
        self.sent: List[bytes] = []
        self.closed = False

    def _check_open(self) -> None:
        if self.closed:
            raise GatewayConnectionError("Stub gateway is closed")

    def balance_of(self, address: AddressLike) -> int:
        self._check_open()
        return self.balances.get(address_text(address), 0)

    def suggested_gas_unit_price(self) -> int:
        self._check_open()
        return self.gas_price

    def pending_nonce(self, address: AddressLike) -> int:
        self._check_open()
        return self.nonces.get(address_text(address), 0)

    def chain_identifier(self) -> int:
        self._check_open()
        return self.chain_id

    def broadcast(self, signed_transaction: bytes) -> str:
        self._check_open()
        if self.fail_broadcast:
            logger.warning("Simulating rejected broadcast")
            raise TransmissionFailure("Stub gateway rejected the transaction")

        self.sent.append(bytes(signed_transaction))
        tx_hash = Web3.to_hex(Web3.keccak(signed_transaction))
        logger.info(f"Recorded transaction {tx_hash[:10]}...")
        return tx_hash

    def close(self) -> None:
        self.closed = True
