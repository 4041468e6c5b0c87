"""
Data models for the jeth SDK.
"""
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, InstanceOf

from .accounting.quote import PaymentQuote
from .identity.types import KeyPair


class BalanceReport(BaseModel):
    """Balance of one account in wei, ether and USD"""
    model_config = ConfigDict(frozen=True)

    address: str
    wei: int
    ether: Decimal
    usd: Decimal
    usd_per_ether: float


class PreparedSend(BaseModel):
    """A payment ready to be signed and broadcast"""
    model_config = ConfigDict(frozen=True)

    sender: InstanceOf[KeyPair]
    receiver: str
    quote: PaymentQuote
    nonce: int
    chain_id: int

    @property
    def transaction(self) -> Dict[str, Any]:
        """Legacy (EIP-155) transaction fields for eth_account"""
        return {
            "nonce": self.nonce,
            "to": self.receiver,
            "value": self.quote.net_wei,
            "gas": self.quote.gas_unit_limit,
            "gasPrice": self.quote.gas_unit_price,
            "chainId": self.chain_id,
            "data": b"",
        }

    def summary(self) -> str:
        return self.quote.summary(self.sender.checksum_address, self.receiver)
