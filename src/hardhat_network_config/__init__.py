"""
hardhat-network-config: resolve blockchain networks, credentials and tool
settings into a single hardhat configuration
"""

from importlib.metadata import PackageNotFoundError, version

from .assembler import assemble, build_config, default_static_settings
from .credentials import SecretSource, load_env_file, load_runtime_options, load_secrets
from .exceptions import ConfigError, MissingSecretError
from .explorer import select_api_key
from .networks import build_all, build_network_config, resolve_scenario_bases
from .providers import resolve_default_url
from .types import (
    ExplorerKeys,
    NetworkDescriptor,
    ResolvedNetworkConfig,
    SecretBundle,
    ToolConfig,
)

try:
    __version__ = version("hardhat-network-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "build_config",
    "assemble",
    "default_static_settings",
    "build_all",
    "build_network_config",
    "resolve_scenario_bases",
    "resolve_default_url",
    "select_api_key",
    "SecretSource",
    "load_secrets",
    "load_runtime_options",
    "load_env_file",
    "NetworkDescriptor",
    "SecretBundle",
    "ExplorerKeys",
    "ResolvedNetworkConfig",
    "ToolConfig",
    "ConfigError",
    "MissingSecretError",
]
