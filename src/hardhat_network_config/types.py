"""Data types and dataclasses for hardhat-network-config library."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

# Gas settings accept a fixed amount or let the node estimate it
GasValue = Union[int, Literal["auto"]]

AUTO: Literal["auto"] = "auto"


@dataclass(frozen=True)
class NetworkDescriptor:
    """Static description of one target chain in the network catalog."""

    name: str  # Unique catalog key, e.g. "mainnet"
    chain_id: int
    url: Optional[str] = None  # Explicit RPC endpoint, used verbatim when set
    gas: Optional[GasValue] = None
    gas_price: Optional[GasValue] = None


@dataclass(frozen=True)
class SecretBundle:
    """Credentials read once from the environment at startup."""

    mnemonic: str
    infura_key: str
    etherscan_key: str
    snowtrace_key: str
    coinmarketcap_key: Optional[str] = None

    def __repr__(self) -> str:
        # Never echo credential values
        return "SecretBundle(<redacted>)"


@dataclass(frozen=True)
class ExplorerKeys:
    """Block-explorer API keys, one per chain family."""

    etherscan: str
    snowtrace: str

    def __repr__(self) -> str:
        return "ExplorerKeys(<redacted>)"


@dataclass(frozen=True)
class RuntimeOptions:
    """Non-secret switches read from the environment."""

    active_network: Optional[str] = None
    report_gas: bool = False


@dataclass(frozen=True)
class AccountsConfig:
    """HD wallet accounts shared by every network."""

    mnemonic: str

    def to_dict(self) -> Dict[str, Any]:
        return {"mnemonic": self.mnemonic}


@dataclass(frozen=True)
class ResolvedNetworkConfig:
    """Fully computed connection and signing settings for one chain."""

    chain_id: int
    url: str
    gas: GasValue
    gas_price: GasValue
    accounts: AccountsConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainId": self.chain_id,
            "url": self.url,
            "gas": self.gas,
            "gasPrice": self.gas_price,
            "accounts": self.accounts.to_dict(),
        }


@dataclass(frozen=True)
class LocalNetworkConfig:
    """In-memory test network run by the build tool itself."""

    chain_id: int
    gas: GasValue
    gas_price: GasValue
    block_gas_limit: int
    accounts: AccountsConfig
    logging_enabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainId": self.chain_id,
            "loggingEnabled": self.logging_enabled,
            "gas": self.gas,
            "gasPrice": self.gas_price,
            "blockGasLimit": self.block_gas_limit,
            "accounts": self.accounts.to_dict(),
        }


@dataclass(frozen=True)
class CompilerSettings:
    """Solidity compiler version pin and optimizer flags."""

    version: str
    optimizer_enabled: bool = True
    optimizer_runs: int = 200

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "settings": {
                "optimizer": {
                    "enabled": self.optimizer_enabled,
                    "runs": self.optimizer_runs,
                },
            },
        }


@dataclass(frozen=True)
class GasReporterSettings:
    """Gas usage reporting toggle and pricing source."""

    enabled: bool
    currency: str
    gas_price: int  # gwei
    coinmarketcap: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "enabled": self.enabled,
            "currency": self.currency,
        }
        if self.coinmarketcap is not None:
            result["coinmarketcap"] = self.coinmarketcap
        result["gasPrice"] = self.gas_price
        return result


@dataclass(frozen=True)
class TypechainSettings:
    """Output location and flavour of generated contract bindings."""

    out_dir: str
    target: str

    def to_dict(self) -> Dict[str, Any]:
        return {"outDir": self.out_dir, "target": self.target}


@dataclass(frozen=True)
class ScenarioBaseDescriptor:
    """Static description of a scenario base environment."""

    name: str
    url: Optional[str] = None
    default_provider: bool = False  # Derive the URL from the provider template


@dataclass(frozen=True)
class ScenarioBase:
    """Named environment used by higher-level test/deployment scenarios."""

    name: str
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.url is not None:
            result["url"] = self.url
        return result


@dataclass(frozen=True)
class StaticSettings:
    """Pass-through settings blocks placed into the final config unchanged."""

    compiler: CompilerSettings
    gas_reporter: GasReporterSettings
    typechain: TypechainSettings
    local_network: LocalNetworkConfig
    scenario_bases: Tuple[ScenarioBase, ...] = ()


NetworkEntry = Union[ResolvedNetworkConfig, LocalNetworkConfig]


@dataclass(frozen=True)
class ToolConfig:
    """Complete configuration handed to the build tool."""

    solidity: CompilerSettings
    networks: Mapping[str, NetworkEntry] = field(hash=False)
    etherscan_api_key: str
    gas_reporter: GasReporterSettings
    typechain: TypechainSettings
    scenario_bases: Tuple[ScenarioBase, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.networks, MappingProxyType):
            object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))

    def to_dict(self) -> Dict[str, Any]:
        """Render the config in the host tool's camelCase layout."""
        return {
            "solidity": self.solidity.to_dict(),
            "networks": {
                name: network.to_dict() for name, network in self.networks.items()
            },
            "etherscan": {"apiKey": self.etherscan_api_key},
            "gasReporter": self.gas_reporter.to_dict(),
            "typechain": self.typechain.to_dict(),
            "scenario": {"bases": [base.to_dict() for base in self.scenario_bases]},
        }
