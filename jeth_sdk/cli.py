"""
Command line interface for the jeth SDK.

    jeth new-wallet
    jeth check --private-key ... --public-key ... --address 0x...
    jeth balance --address 0x...
    jeth gas
    jeth send --receiver-address 0x... --amount 0.5 [--dry-run] [--yes]
"""
import argparse
import getpass
import logging
import os
import sys
import time
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from .accounting import base_to_gwei, format_decimal
from .accounting.units import to_decimal
from .client import WalletClient
from .config import NetworkConfig
from .exceptions import JethError
from .gateway.transport import get_gateway
from .price import CoinbasePriceSource
from .version import __version__

logger = logging.getLogger("jeth")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jeth", description="Create, check and spend from Ethereum wallets."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--network", help="Network name from the packaged network table")
    parser.add_argument("--gateway", help="JSON-RPC endpoint of your ethereum provider")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("new-wallet", help="Generate and validate a new wallet")

    check = commands.add_parser("check", help="Validate a stored wallet")
    check.add_argument("--private-key", help="Hexadecimal private key (prompted if omitted)")
    check.add_argument("--public-key", required=True, help="Hexadecimal public key")
    check.add_argument("--address", required=True, help="Wallet address")

    balance = commands.add_parser("balance", help="Show the balance of an address")
    balance.add_argument("--address", required=True, help="Wallet address whose balance to check")

    commands.add_parser("gas", help="Show the network's suggested gas price")

    send = commands.add_parser("send", help="Send ether, paying gas out of the amount")
    send.add_argument("--private-key", help="Sender's hexadecimal private key (prompted if omitted)")
    send.add_argument("--receiver-address", help="Receiver's wallet address (prompted if omitted)")
    send.add_argument("--amount", help="Amount of ether to send, gas included (prompted if omitted)")
    send.add_argument("--gas-price", type=int, default=0,
                      help="Gas price in wei; 0 uses the network's suggested gas price")
    send.add_argument("--gas-limit", type=int, default=None,
                      help="Gas limit for the transaction (network default if omitted)")
    send.add_argument("--dry-run", action="store_true",
                      help="Build and display the transaction without sending it")
    send.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")

    return parser


def _private_key(value: Optional[str]) -> str:
    if value:
        return value
    value = os.environ.get("JETH_PRIVATE_KEY")
    if value:
        return value
    return getpass.getpass("private key not given via \"--private-key\", enter manually instead: ")


def _build_client(args: argparse.Namespace) -> WalletClient:
    gateway = get_gateway(args.gateway or NetworkConfig.get_rpc_url(args.network))
    price_source = CoinbasePriceSource(NetworkConfig.get_price_url(args.network))
    return WalletClient(
        gateway,
        price_source=price_source,
        gas_limit=NetworkConfig.default_gas_limit(args.network)
    )


def _new_wallet(client: WalletClient, args: argparse.Namespace) -> int:
    print("Generating a new Ethereum private key, public key, and wallet address...")
    start = time.time()
    key_pair = client.new_wallet()
    elapsed = time.time() - start
    print(
        f"\nPRIVATE KEY:\n{key_pair.private_key_hex()}\n"
        f"\nPUBLIC KEY:\n{key_pair.public_key_hex()}\n"
        f"\nWALLET ADDRESS:\n{key_pair.checksum_address}\n"
        f"\nWallet has been validated and is well-formed and correct.\n"
        f"\nSuccess! ({elapsed:.3f}s)"
    )
    return 0


def _check(client: WalletClient, args: argparse.Namespace) -> int:
    key_pair = client.check_wallet(_private_key(args.private_key), args.public_key, args.address)
    print(f"Wallet {key_pair.checksum_address} is well-formed and correct.")
    return 0


def _balance(client: WalletClient, args: argparse.Namespace) -> int:
    report = client.balance_report(args.address)
    print(f"{report.wei} wei")
    print(f"{format_decimal(report.ether)} ether")
    print(f"${report.usd:.2f}")
    return 0


def _gas(client: WalletClient, args: argparse.Namespace) -> int:
    gas_price = client.suggested_gas_price()
    print(f"{gas_price} wei ({format_decimal(base_to_gwei(gas_price))} gwei)")
    return 0


def _send(client: WalletClient, args: argparse.Namespace) -> int:
    logger.info("send initiated at %s", datetime.now().isoformat())
    private_key = _private_key(args.private_key)

    receiver = args.receiver_address or input(
        "receiver's wallet address not given via \"--receiver-address\", enter manually instead: "
    ).strip()
    amount_text = args.amount or input(
        "ether amount to send not given via \"--amount\", enter manually instead: "
    ).strip()
    amount = to_decimal(amount_text, "amount")
    if amount <= Decimal(0):
        raise ValueError("must provide a non-negative non-zero eth amount to send via \"--amount\"")

    prepared = client.prepare_send(
        private_key, receiver, amount, gas_price=args.gas_price, gas_limit=args.gas_limit
    )

    with prepared.sender.private_scalar:
        print("\n----- SUMMARY -----")
        print(prepared.summary())

        if args.dry_run:
            print("dry run: transaction not sent")
            return 0

        if not args.yes:
            response = input(
                "WARNING: you are about to send the above transaction to the ethereum network, "
                "please double check the summary above for accuracy, this cannot be undone if "
                "successful. PROCEED? [y/N]: "
            ).strip().lower()
            if response not in ("y", "yes"):
                print("aborting...")
                return 0

        tx_hash = client.send(prepared)
    print(f"success: transaction hash: [TRANSACTION] {tx_hash}")
    logger.info("send completed at %s", datetime.now().isoformat())
    return 0


_COMMANDS = {
    "new-wallet": _new_wallet,
    "check": _check,
    "balance": _balance,
    "gas": _gas,
    "send": _send,
}


def main(argv: Optional[Sequence[str]] = None, client: Optional[WalletClient] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to ``sys.argv[1:]``)
        client: Preconfigured client (built from the arguments if None)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    try:
        if client is None:
            client = _build_client(args)
        return _COMMANDS[args.command](client, args)
    except (JethError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    except KeyboardInterrupt:
        print("\naborted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
