"""
Gateway module for the jeth SDK.

This module provides the ledger gateway used to read balances, nonces,
gas prices and the chain id from an Ethereum node, and to broadcast
signed transactions.
"""
from .exceptions import GatewayConnectionError, GatewayError, TransmissionFailure
from .stub_transport import StubGateway
from .transport import LedgerGateway, get_gateway
from .web3_transport import Web3Gateway

__all__ = ['LedgerGateway', 'Web3Gateway', 'StubGateway', 'get_gateway',
           'GatewayError', 'GatewayConnectionError', 'TransmissionFailure']
