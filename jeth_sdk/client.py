"""
WalletClient - workflows for creating wallets, checking them and sending ether.
"""
import logging
from typing import Optional

from eth_account import Account

from . import identity
from .accounting import (
    MonetaryAmount, build_payment_quote, base_to_fiat, format_decimal
)
from .accounting.units import AmountLike
from .config import NetworkConfig
from .exceptions import InvalidKeyEncoding
from .gateway.exceptions import TransmissionFailure
from .gateway.transport import AddressLike, LedgerGateway, address_text
from .identity.ec_constants import ADDRESS_HEX_LENGTH
from .identity.types import Address, KeyPair, PrivateScalar
from .models import BalanceReport, PreparedSend
from .price import FiatPriceSource
from .utils import obfuscate_key


def parse_receiver_address(address: str) -> str:
    """
    Check a receiver address and return its checksummed form.

    The address must be ``0x`` followed by 40 hex characters. Mixed-case
    input must carry a correct EIP-55 checksum.

    Raises:
        InvalidKeyEncoding: If the address is malformed or its checksum is wrong
    """
    if not isinstance(address, str) or len(address) != ADDRESS_HEX_LENGTH + 2 or not address.startswith("0x"):
        raise InvalidKeyEncoding(
            "receiver address must be a 42 character hexadecimal address starting with \"0x\"",
            field="receiver"
        )
    checksum = Address.from_hex(address).checksum
    body = address[2:]
    if body != body.lower() and body != body.upper() and address != checksum:
        raise InvalidKeyEncoding(
            f"receiver address checksum is invalid: \"{address}\"", field="receiver"
        )
    return checksum


class WalletClient:
    """
    Client for the wallet workflows.

    The client composes the identity and value-accounting components with a
    ledger gateway and a USD price source:

    1. Generating and validating key pairs
    2. Reading balances and gas prices
    3. Building, signing and broadcasting value transfers

    Args:
        gateway: Ledger gateway used for all node access
        price_source: USD price source; required for balances in USD and sends
        gas_limit: Default gas limit for sends (network default if None)
        logger: Optional logger instance to use for debug/info logging
    """

    def __init__(
        self,
        gateway: LedgerGateway,
        price_source: Optional[FiatPriceSource] = None,
        gas_limit: Optional[int] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.gateway = gateway
        self.price_source = price_source
        if gas_limit is None:
            gas_limit = NetworkConfig.default_gas_limit()
        self.gas_limit = gas_limit
        self.logger = logger or logging.getLogger(__name__)

    def _usd_per_ether(self) -> float:
        if self.price_source is None:
            raise ValueError("A price source is required for this operation")
        usd_per_ether = self.price_source.current_fiat_per_fractional_unit()
        self.logger.info(f"Current usd per ether: ${usd_per_ether}")
        return usd_per_ether

    def new_wallet(self) -> KeyPair:
        """
        Generate a new key pair and prove it is consistent.

        Raises:
            RandomSourceFailure: If secure randomness is unavailable
            IdentityMismatch: If the generated key pair fails validation
        """
        key_pair = identity.generate()
        identity.validate(key_pair)
        self.logger.info(f"Generated and validated wallet {key_pair.checksum_address}")
        return key_pair

    def check_wallet(self, private_key_hex: str, public_key_hex: str, address: str) -> KeyPair:
        """
        Rehydrate a stored key pair and validate it.

        Raises:
            InvalidKeyEncoding: If any value has the wrong length or is not hex
            IdentityMismatch: If the values do not belong together
        """
        key_pair = identity.construct_hex(private_key_hex, public_key_hex, address)
        identity.validate(key_pair)
        self.logger.info(f"Wallet {key_pair.checksum_address} is well-formed and correct")
        return key_pair

    def balance(self, address: AddressLike) -> MonetaryAmount:
        """Balance of ``address``."""
        return MonetaryAmount(self.gateway.balance_of(address))

    def balance_report(self, address: AddressLike) -> BalanceReport:
        """Balance of ``address`` in wei, ether and USD."""
        account = address_text(address)
        amount = self.balance(account)
        usd_per_ether = self._usd_per_ether()
        return BalanceReport(
            address=account,
            wei=amount.wei,
            ether=amount.ether,
            usd=amount.usd(usd_per_ether),
            usd_per_ether=usd_per_ether
        )

    def suggested_gas_price(self) -> int:
        """Gas price suggested by the node, in wei."""
        return self.gateway.suggested_gas_unit_price()

    def prepare_send(
        self,
        private_key_hex: str,
        receiver_address: str,
        amount_ether: AmountLike,
        gas_price: Optional[int] = None,
        gas_limit: Optional[int] = None
    ) -> PreparedSend:
        """
        Build everything needed to send ``amount_ether`` to ``receiver_address``.

        Gas is paid out of the amount: the receiver gets the amount minus
        gas price * gas limit.

        Args:
            private_key_hex: Sender's private key (64 hex characters)
            receiver_address: Receiver's ``0x`` address
            amount_ether: Ether to part with, gas included
            gas_price: Wei per gas unit; None or 0 uses the node's suggestion
            gas_limit: Gas units; None uses the client default

        Returns:
            PreparedSend holding the quote and the unsigned transaction

        Raises:
            InvalidKeyEncoding: If the key or the receiver address is malformed
            InvalidScalar: If the private key is out of range
            PriceUnavailable: If the USD price cannot be fetched
            GatewayError: If the node cannot be queried
            ValueAccountingError: If the amounts or gas parameters are invalid
        """
        receiver = parse_receiver_address(receiver_address)
        usd_per_ether = self._usd_per_ether()

        with PrivateScalar.from_hex(private_key_hex) as scalar:
            self.logger.info(f"Converted private key: [PRIVATE] {obfuscate_key(scalar.reveal_hex())}")
            sender = identity.derive_from_private_scalar(scalar)
        self.logger.info(f"Sender's public key: [PUBLIC] {sender.public_key_hex()}")
        self.logger.info(f"Sender's wallet address: [WALLET] {sender.checksum_address}")

        nonce = self.gateway.pending_nonce(sender.address)
        self.logger.info(f"Sender's nonce: [NONCE] {nonce}")

        if not gas_price:
            gas_price = self.gateway.suggested_gas_unit_price()
            self.logger.info(
                f"Suggested gas price: {gas_price} wei (${base_to_fiat(gas_price, usd_per_ether):f})"
            )
        if gas_limit is None:
            gas_limit = self.gas_limit

        quote = build_payment_quote(amount_ether, gas_price, gas_limit, usd_per_ether)
        self.logger.info(
            f"Gas makes up {quote.gas_proportion * 100:.3f}% of the value to be sent; "
            f"receiver gets {format_decimal(quote.net_ether)} ether (${quote.net_usd:.2f})"
        )

        chain_id = self.gateway.chain_identifier()
        self.logger.info(f"Chain id: {chain_id}")

        return PreparedSend(
            sender=sender,
            receiver=receiver,
            quote=quote,
            nonce=nonce,
            chain_id=chain_id
        )

    def send(self, prepared: PreparedSend) -> str:
        """
        Sign a prepared payment and broadcast it.

        Returns:
            Transaction hash

        Raises:
            TransmissionFailure: If signing or broadcasting fails
        """
        try:
            signed_tx = Account.sign_transaction(
                prepared.transaction, prepared.sender.private_scalar.to_bytes()
            )
        except Exception as e:
            self.logger.error(f"Transaction signing failed: {e}")
            raise TransmissionFailure(f"Failed to sign transaction: {str(e)}") from e
        self.logger.info("Transaction signed successfully")

        tx_hash = self.gateway.broadcast(signed_tx.raw_transaction)
        self.logger.info(f"Success: transaction hash: [TRANSACTION] {tx_hash}")
        return tx_hash
