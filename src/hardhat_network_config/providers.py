"""Default RPC provider URLs for hardhat-network-config library."""

from .constants import PROVIDER_HOST, PROVIDER_URL_TEMPLATE


def resolve_default_url(network_name: str, infura_key: str) -> str:
    """
    Build the default RPC endpoint for a network.

    Only string construction happens here; the endpoint is never contacted.

    Args:
        network_name: Catalog name of the network (e.g., "goerli")
        infura_key: Provider project key

    Returns:
        URL of the form https://{network}.infura.io/v3/{key}
    """
    return PROVIDER_URL_TEMPLATE.format(
        network=network_name, host=PROVIDER_HOST, key=infura_key
    )
