"""
Network configuration for the jeth SDK.

Networks are shipped as package data (``networks.json``). Environment
variables override the packaged values:

- ``JETH_NETWORK``: network name (default ``mainnet``)
- ``JETH_RPC_URL``: JSON-RPC endpoint
- ``JETH_PRICE_URL``: USD price endpoint
"""
import importlib.resources
import json
import logging
import os
from typing import Any, Dict, Optional

from jeth_sdk.accounting.gas import DEFAULT_GAS_LIMIT

logger = logging.getLogger(__name__)

DEFAULT_NETWORK = "mainnet"
DEFAULT_GATEWAY = "https://cloudflare-eth.com"


class NetworkConfig:
    """Access to the packaged network table."""

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load the network table, caching it after the first read.

        Returns:
            Mapping of network name to its settings
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        resource = importlib.resources.files("jeth_sdk").joinpath("networks.json")
        with resource.open("r", encoding="utf-8") as f:
            cls._networks_cache = json.load(f)
        logger.debug("Loaded %d network definitions", len(cls._networks_cache))
        return cls._networks_cache

    @classmethod
    def default_network(cls) -> str:
        return os.environ.get("JETH_NETWORK", DEFAULT_NETWORK)

    @classmethod
    def get_network(cls, name: Optional[str] = None) -> Dict[str, Any]:
        """
        Get one network's settings.

        Raises:
            ValueError: If the network is unknown; the message lists known networks
        """
        name = name or cls.default_network()
        networks = cls.load_networks()
        if name not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Unknown network '{name}'. Available networks: {available}")
        return networks[name]

    @classmethod
    def get_rpc_url(cls, name: Optional[str] = None) -> str:
        """RPC endpoint, ``JETH_RPC_URL`` taking precedence over the table."""
        override = os.environ.get("JETH_RPC_URL")
        if override:
            return override
        return cls.get_network(name).get("rpc", DEFAULT_GATEWAY)

    @classmethod
    def get_price_url(cls, name: Optional[str] = None) -> Optional[str]:
        override = os.environ.get("JETH_PRICE_URL")
        if override:
            return override
        return cls.get_network(name).get("priceUrl")

    @classmethod
    def get_chain_id(cls, name: Optional[str] = None) -> int:
        return int(cls.get_network(name)["chainId"])

    @classmethod
    def default_gas_limit(cls, name: Optional[str] = None) -> int:
        return int(cls.get_network(name).get("gasLimit", DEFAULT_GAS_LIMIT))
