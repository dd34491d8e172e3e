"""Per-network runtime configuration builder for hardhat-network-config library."""

import logging
from typing import Dict, Iterable, List

from .providers import resolve_default_url
from .types import (
    AUTO,
    AccountsConfig,
    NetworkDescriptor,
    ResolvedNetworkConfig,
    ScenarioBase,
    ScenarioBaseDescriptor,
    SecretBundle,
)

logger = logging.getLogger(__name__)


def build_network_config(
    descriptor: NetworkDescriptor, secrets: SecretBundle
) -> ResolvedNetworkConfig:
    """
    Resolve one catalog entry into concrete connection settings.

    An explicit url is used verbatim; only when it is absent or empty is the default
    provider URL derived. Gas settings default to "auto".

    Args:
        descriptor: Catalog entry
        secrets: Validated credentials

    Returns:
        ResolvedNetworkConfig sharing the bundle's mnemonic
    """
    if descriptor.url:
        url = descriptor.url
    else:
        url = resolve_default_url(descriptor.name, secrets.infura_key)

    return ResolvedNetworkConfig(
        chain_id=descriptor.chain_id,
        url=url,
        gas=descriptor.gas if descriptor.gas is not None else AUTO,
        gas_price=descriptor.gas_price if descriptor.gas_price is not None else AUTO,
        accounts=AccountsConfig(mnemonic=secrets.mnemonic),
    )


def build_all(
    catalog: Iterable[NetworkDescriptor], secrets: SecretBundle
) -> Dict[str, ResolvedNetworkConfig]:
    """
    Resolve every catalog entry, keyed by network name in catalog order.

    Duplicate names are not rejected: the later entry replaces the earlier
    one, and a warning is logged.

    Args:
        catalog: Network descriptors
        secrets: Validated credentials

    Returns:
        Dictionary mapping network name -> ResolvedNetworkConfig
    """
    resolved: Dict[str, ResolvedNetworkConfig] = {}

    for descriptor in catalog:
        if descriptor.name in resolved:
            logger.warning(
                f"Duplicate network '{descriptor.name}' in catalog; later entry wins"
            )
        resolved[descriptor.name] = build_network_config(descriptor, secrets)
        logger.debug(
            f"Resolved network '{descriptor.name}' (chain ID {descriptor.chain_id})"
        )

    return resolved


def resolve_scenario_bases(
    descriptors: Iterable[ScenarioBaseDescriptor], infura_key: str
) -> List[ScenarioBase]:
    """
    Resolve scenario base environments.

    Args:
        descriptors: Scenario base descriptors
        infura_key: Provider project key for bases using the default provider

    Returns:
        List of ScenarioBase in input order
    """
    bases = []
    for descriptor in descriptors:
        url = descriptor.url
        if url is None and descriptor.default_provider:
            url = resolve_default_url(descriptor.name, infura_key)
        bases.append(ScenarioBase(name=descriptor.name, url=url))
    return bases
