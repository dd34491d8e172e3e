"""Configuration constants for hardhat-network-config library."""

from .types import (
    AUTO,
    AccountsConfig,
    CompilerSettings,
    LocalNetworkConfig,
    NetworkDescriptor,
    ScenarioBaseDescriptor,
    TypechainSettings,
)

# Environment variables holding credentials and switches
ETHERSCAN_KEY_ENV = "ETHERSCAN_KEY"
SNOWTRACE_KEY_ENV = "SNOWTRACE_KEY"
INFURA_KEY_ENV = "INFURA_KEY"
MNEMONIC_ENV = "MNEMONIC"
COINMARKETCAP_KEY_ENV = "COINMARKETCAP_API_KEY"
REPORT_GAS_ENV = "REPORT_GAS"
ACTIVE_NETWORK_ENV = "NETWORK"

# Validated in this order, first missing one fails
REQUIRED_SECRETS = (ETHERSCAN_KEY_ENV, SNOWTRACE_KEY_ENV, INFURA_KEY_ENV)

# Default RPC endpoints: https://{network}.{host}/v3/{key}
PROVIDER_HOST = "infura.io"
PROVIDER_URL_TEMPLATE = "https://{network}.{host}/v3/{key}"

AVALANCHE_RPC_URL = "https://api.avax.network/ext/bc/C/rpc"
FUJI_RPC_URL = "https://api.avax-test.network/ext/bc/C/rpc"

NETWORK_CATALOG = (
    NetworkDescriptor(name="mainnet", chain_id=1),
    NetworkDescriptor(name="ropsten", chain_id=3),
    NetworkDescriptor(name="rinkeby", chain_id=4),
    NetworkDescriptor(name="goerli", chain_id=5),
    NetworkDescriptor(name="kovan", chain_id=42),
    NetworkDescriptor(name="avalanche", chain_id=43114, url=AVALANCHE_RPC_URL),
    NetworkDescriptor(name="fuji", chain_id=43113, url=FUJI_RPC_URL),
)

# Explorer key categories
ETHERSCAN = "etherscan"
SNOWTRACE = "snowtrace"
DEFAULT_API_KEY_CATEGORY = ETHERSCAN

API_KEY_CATEGORIES = {
    "mainnet": ETHERSCAN,
    "rinkeby": ETHERSCAN,
    "goerli": ETHERSCAN,
    "ropsten": ETHERSCAN,
    "avalanche": SNOWTRACE,
    "fuji": SNOWTRACE,
}

LOCAL_NETWORK_NAME = "hardhat"

# Well-known public test phrase, never holds real funds
LOCAL_NETWORK_MNEMONIC = (
    "myth like bonus scare over problem client lizard pioneer submit female collect"
)

LOCAL_NETWORK = LocalNetworkConfig(
    chain_id=1337,
    gas=12000000,
    gas_price=AUTO,
    block_gas_limit=12000000,
    accounts=AccountsConfig(mnemonic=LOCAL_NETWORK_MNEMONIC),
    logging_enabled=False,
)

COMPILER = CompilerSettings(version="0.8.4", optimizer_enabled=True, optimizer_runs=1000)

GAS_REPORTER_CURRENCY = "USD"
GAS_REPORTER_GAS_PRICE = 200  # gwei

TYPECHAIN = TypechainSettings(out_dir="build/types", target="ethers-v5")

SCENARIO_BASES = (
    ScenarioBaseDescriptor(name="development"),
    ScenarioBaseDescriptor(name="goerli", default_provider=True),
    ScenarioBaseDescriptor(name="fuji", url=FUJI_RPC_URL),
)
