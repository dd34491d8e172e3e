"""Command line entry point for hardhat-network-config."""

import argparse
import copy
import json
import logging
import os
from typing import Any, Dict, List, Optional

from .assembler import build_config
from .constants import NETWORK_CATALOG
from .credentials import load_env_file, load_secrets
from .exceptions import MissingSecretError
from .logging_config import LOG_LEVELS, setup_logging
from .providers import resolve_default_url
from .types import SecretBundle

logger = logging.getLogger(__name__)

REDACTED = "***"


def _redact_url(name: str, url: str, infura_key: str) -> str:
    # Only URLs built from the provider template carry the key
    if url == resolve_default_url(name, infura_key):
        return resolve_default_url(name, REDACTED)
    return url


def redact(data: Dict[str, Any], secrets: SecretBundle) -> Dict[str, Any]:
    """
    Mask credentials in a rendered configuration.

    Secrets are masked by position: the shared mnemonic, the explorer key,
    the pricing key, and the key segment of default provider URLs. No other
    value is touched.

    Args:
        data: Output of ToolConfig.to_dict()
        secrets: Credentials the configuration was built from

    Returns:
        Masked copy of data
    """
    result = copy.deepcopy(data)

    for name, network in result["networks"].items():
        if "url" in network:
            network["url"] = _redact_url(name, network["url"], secrets.infura_key)
        accounts = network.get("accounts", {})
        if secrets.mnemonic and accounts.get("mnemonic") == secrets.mnemonic:
            accounts["mnemonic"] = REDACTED

    result["etherscan"]["apiKey"] = REDACTED

    if result["gasReporter"].get("coinmarketcap") is not None:
        result["gasReporter"]["coinmarketcap"] = REDACTED

    for base in result["scenario"]["bases"]:
        if "url" in base:
            base["url"] = _redact_url(base["name"], base["url"], secrets.infura_key)

    return result


def _show(args: argparse.Namespace) -> int:
    load_env_file(args.env_file)

    try:
        config = build_config(active_network=args.network)
    except MissingSecretError as e:
        logger.error(str(e))
        return 1

    data = config.to_dict()
    if not args.show_secrets:
        data = redact(data, load_secrets())

    print(json.dumps(data, indent=2))
    return 0


def _networks(args: argparse.Namespace) -> int:
    for descriptor in NETWORK_CATALOG:
        source = "explicit" if descriptor.url else "default provider"
        print(f"{descriptor.name:<12} {descriptor.chain_id:>8}  {source}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hardhat-network-config",
        description="Resolve network, credential and tool settings for hardhat.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the assembled configuration as JSON")
    show.add_argument("--network", default=None, help="Active network (default: $NETWORK)")
    show.add_argument("--env-file", default=None, help="Dotenv file to load (default: ./.env)")
    show.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print credentials instead of masking them",
    )
    show.set_defaults(func=_show)

    networks = subparsers.add_parser("networks", help="List the network catalog")
    networks.set_defaults(func=_networks)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or os.getenv("LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL '{level}' (choose from {', '.join(LOG_LEVELS)})")

    setup_logging(level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
