"""
USD price sources for ether.
"""
import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import PriceUnavailable

logger = logging.getLogger(__name__)

COINBASE_BUY_PRICE_URL = "https://api.coinbase.com/v2/prices/ETH-USD/buy"


class FiatPriceSource(ABC):
    """Source of the current USD price of one ether."""

    @abstractmethod
    def current_fiat_per_fractional_unit(self) -> float:
        """
        Current USD per ether.

        Raises:
            PriceUnavailable: If no price can be produced
        """
        pass

    # Ethereum-flavoured name
    def usd_per_ether(self) -> float:
        return self.current_fiat_per_fractional_unit()


class StaticPriceSource(FiatPriceSource):
    """Always returns the same price; for offline use and tests."""

    def __init__(self, usd_per_ether: float):
        if not math.isfinite(usd_per_ether) or usd_per_ether <= 0:
            raise ValueError(f"usd_per_ether must be a positive number, got {usd_per_ether}")
        self.price = usd_per_ether

    def current_fiat_per_fractional_unit(self) -> float:
        return self.price


class CoinbasePriceSource(FiatPriceSource):
    """
    Reads the ETH-USD buy price from the Coinbase public API.

    Args:
        url: Price endpoint; defaults to the Coinbase buy price
        retry_count: Number of retries for HTTP requests
        timeout: Timeout for HTTP requests in seconds
        session: Preconfigured requests session (mainly for tests)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        retry_count: int = 3,
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        self.url = url or COINBASE_BUY_PRICE_URL
        self.timeout = timeout

        if session is None:
            session = requests.Session()
            retries = Retry(
                total=retry_count,
                backoff_factor=0.5,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False
            )
            session.mount("http://", HTTPAdapter(max_retries=retries))
            session.mount("https://", HTTPAdapter(max_retries=retries))
        self.session = session

    def current_fiat_per_fractional_unit(self) -> float:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Price request failed: {e}")
            raise PriceUnavailable(f"Fetching latest eth price failed: {str(e)}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response from price source: {e}")
            raise PriceUnavailable(f"Decoding response body failed: {str(e)}") from e

        try:
            price = float(body["data"]["amount"])
        except (KeyError, TypeError, ValueError) as e:
            raise PriceUnavailable(f"Missing or invalid amount in price response: {body}") from e

        if not math.isfinite(price) or price <= 0:
            raise PriceUnavailable(f"Price source returned a non-positive price: {price}")

        logger.debug("Current USD per ether: %s", price)
        return price
