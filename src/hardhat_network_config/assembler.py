"""Main API for hardhat-network-config library."""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from .constants import (
    COMPILER,
    GAS_REPORTER_CURRENCY,
    GAS_REPORTER_GAS_PRICE,
    LOCAL_NETWORK,
    LOCAL_NETWORK_NAME,
    NETWORK_CATALOG,
    SCENARIO_BASES,
    TYPECHAIN,
)
from .credentials import load_runtime_options, load_secrets
from .explorer import select_api_key
from .networks import build_all, resolve_scenario_bases
from .types import (
    ExplorerKeys,
    GasReporterSettings,
    NetworkDescriptor,
    NetworkEntry,
    ResolvedNetworkConfig,
    RuntimeOptions,
    SecretBundle,
    StaticSettings,
    ToolConfig,
)

logger = logging.getLogger(__name__)


def default_static_settings(secrets: SecretBundle, options: RuntimeOptions) -> StaticSettings:
    """
    Build the pass-through settings blocks.

    Args:
        secrets: Validated credentials (pricing key, provider key for scenario bases)
        options: Runtime switches (gas reporting)

    Returns:
        StaticSettings for the compiler, gas reporter, bindings, local network
        and scenario bases
    """
    return StaticSettings(
        compiler=COMPILER,
        gas_reporter=GasReporterSettings(
            enabled=options.report_gas,
            currency=GAS_REPORTER_CURRENCY,
            gas_price=GAS_REPORTER_GAS_PRICE,
            coinmarketcap=secrets.coinmarketcap_key,
        ),
        typechain=TYPECHAIN,
        local_network=LOCAL_NETWORK,
        scenario_bases=tuple(resolve_scenario_bases(SCENARIO_BASES, secrets.infura_key)),
    )


def assemble(
    network_map: Mapping[str, ResolvedNetworkConfig],
    api_key: str,
    static_settings: StaticSettings,
) -> ToolConfig:
    """
    Place the computed pieces into one immutable configuration.

    The local network is registered first under "hardhat"; a resolved
    network of the same name replaces it.

    Args:
        network_map: Resolved networks keyed by name
        api_key: Selected block-explorer API key
        static_settings: Pass-through settings blocks

    Returns:
        New ToolConfig; inputs are not modified
    """
    networks: Dict[str, NetworkEntry] = {LOCAL_NETWORK_NAME: static_settings.local_network}
    networks.update(network_map)

    return ToolConfig(
        solidity=static_settings.compiler,
        networks=MappingProxyType(networks),
        etherscan_api_key=api_key,
        gas_reporter=static_settings.gas_reporter,
        typechain=static_settings.typechain,
        scenario_bases=tuple(static_settings.scenario_bases),
    )


def build_config(
    environ: Optional[Mapping[str, str]] = None,
    active_network: Optional[str] = None,
    catalog: Iterable[NetworkDescriptor] = NETWORK_CATALOG,
) -> ToolConfig:
    """
    Build the complete configuration from the environment.

    Credentials are validated before any network is resolved.

    Args:
        environ: Variables to read from (defaults to os.environ)
        active_network: Network targeted by the build tool
                        (defaults to $NETWORK)
        catalog: Network descriptors to resolve

    Returns:
        ToolConfig ready for the build tool

    Raises:
        MissingSecretError: If a mandatory credential is missing
    """
    secrets = load_secrets(environ)
    options = load_runtime_options(environ)

    if active_network is None:
        active_network = options.active_network

    network_map = build_all(catalog, secrets)
    api_key = select_api_key(
        active_network,
        ExplorerKeys(etherscan=secrets.etherscan_key, snowtrace=secrets.snowtrace_key),
    )
    logger.info(
        f"Built configuration for {len(network_map)} networks "
        f"(active network: {active_network or 'default'})"
    )

    return assemble(network_map, api_key, default_static_settings(secrets, options))
