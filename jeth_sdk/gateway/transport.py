"""
Transport layer for the ledger gateway.

This module defines the interface the wallet workflows use to talk to an
Ethereum node, so the JSON-RPC implementation can be swapped for the
in-memory one in dry runs and tests.
"""
import logging
import urllib.parse
from abc import ABC, abstractmethod
from typing import Optional, Union

from jeth_sdk.identity.types import Address

logger = logging.getLogger(__name__)

AddressLike = Union[str, Address]


def address_text(address: AddressLike) -> str:
    """Checksummed ``0x`` form of an address given as string or Address."""
    if isinstance(address, Address):
        return address.checksum
    return Address.from_hex(address).checksum


def check_gateway_url(url: str) -> None:
    """
    Require https unless the host is local.

    Raises:
        ValueError: If the URL is not https and not localhost/127.0.0.1
    """
    parsed = urllib.parse.urlparse(url)
    host = parsed.netloc.split(':')[0] if parsed.netloc else ''
    is_local = host in ('localhost', '127.0.0.1')
    if parsed.scheme != 'https' and not is_local:
        raise ValueError(f"gateway url must use https:// for security (got: {parsed.scheme}://)")


class LedgerGateway(ABC):
    """
    Abstract base class for ledger gateway implementations.

    All amounts are integers in wei.
    """

    @abstractmethod
    def balance_of(self, address: AddressLike) -> int:
        """
        Latest balance of ``address``.

        Raises:
            GatewayConnectionError: If the node cannot answer
        """
        pass

    @abstractmethod
    def suggested_gas_unit_price(self) -> int:
        """Gas price the node suggests, in wei per unit of gas."""
        pass

    @abstractmethod
    def pending_nonce(self, address: AddressLike) -> int:
        """Next nonce for ``address``, pending transactions included."""
        pass

    @abstractmethod
    def chain_identifier(self) -> int:
        """EIP-155 chain id of the connected network."""
        pass

    @abstractmethod
    def broadcast(self, signed_transaction: bytes) -> str:
        """
        Send a raw signed transaction.

        Returns:
            Transaction hash, ``0x`` prefixed

        Raises:
            TransmissionFailure: If the node rejects or never receives it
        """
        pass

    def close(self) -> None:
        """Close any open connections or resources."""
        pass


def get_gateway(rpc_url: Optional[str] = None, offline: bool = False, timeout: int = 30) -> LedgerGateway:
    """
    Get a gateway implementation.

    Args:
        rpc_url: JSON-RPC endpoint; defaults to the configured network
        offline: Return the in-memory gateway instead of a network one
        timeout: HTTP timeout in seconds

    Returns:
        Gateway implementation
    """
    if offline:
        from .stub_transport import StubGateway
        logger.info("Using in-memory gateway")
        return StubGateway()

    from jeth_sdk.config import NetworkConfig
    from .web3_transport import Web3Gateway

    url = rpc_url or NetworkConfig.get_rpc_url()
    logger.info("Using JSON-RPC gateway %s", url)
    return Web3Gateway(url, timeout=timeout)
