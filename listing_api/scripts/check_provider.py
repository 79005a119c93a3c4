#!/usr/bin/env python3
"""
Check that the JSON-RPC provider answers before running the API against it.

Usage:
    RPC_URL=http://127.0.0.1:8545 check-provider
"""
import logging
import os
import sys

from dotenv import load_dotenv
from web3 import Web3

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


def get_web3(rpc_url: str) -> Web3:
    """Get Web3 instance connected to the node."""
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if not w3.is_connected():
        raise ConnectionError(f"Could not connect to {rpc_url}")
    return w3


def check_provider(rpc_url: str) -> int:
    """Return 0 when the provider reports a block number, 1 otherwise."""
    try:
        block_number = get_web3(rpc_url).eth.block_number
    except Exception as e:
        logger.error(f"Provider not reachable: {e}")
        return 1

    logger.info(f"Provider ready. Current block: {block_number}")
    return 0


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    load_dotenv()
    sys.exit(check_provider(os.getenv("RPC_URL", DEFAULT_RPC_URL)))


if __name__ == "__main__":
    main()
