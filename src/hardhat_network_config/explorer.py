"""Block-explorer API key selection for hardhat-network-config library."""

from typing import Optional

from .constants import API_KEY_CATEGORIES, DEFAULT_API_KEY_CATEGORY, SNOWTRACE
from .types import ExplorerKeys


def api_key_category(active_network: Optional[str]) -> str:
    """
    Map a network name to the explorer family whose key it needs.

    Args:
        active_network: Name of the network targeted by the build tool, if any

    Returns:
        "etherscan" or "snowtrace"; unknown or missing names map to "etherscan"
    """
    if active_network is None:
        return DEFAULT_API_KEY_CATEGORY
    return API_KEY_CATEGORIES.get(active_network, DEFAULT_API_KEY_CATEGORY)


def select_api_key(active_network: Optional[str], keys: ExplorerKeys) -> str:
    """
    Select the block-explorer API key for the active network.

    Args:
        active_network: Name of the network targeted by the build tool, if any
        keys: Available explorer keys

    Returns:
        The matching key. Unrecognized networks fall back to the etherscan key.
    """
    if api_key_category(active_network) == SNOWTRACE:
        return keys.snowtrace
    return keys.etherscan
