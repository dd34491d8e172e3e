"""Shared pytest fixtures for hardhat-network-config tests."""

import os
from pathlib import Path
from typing import Dict

import pytest

from hardhat_network_config.types import NetworkDescriptor, SecretBundle


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_env_file(fixtures_dir: Path) -> Path:
    """Return path to sample dotenv file."""
    return fixtures_dir / "sample.env"


@pytest.fixture
def secrets_environ() -> Dict[str, str]:
    """Return an environment mapping with every credential set."""
    return {
        "ETHERSCAN_KEY": "etherscan-key-123",
        "SNOWTRACE_KEY": "snowtrace-key-456",
        "INFURA_KEY": "infura-key-789",
        "MNEMONIC": "candy maple cake sugar pudding cream honey rich smooth crumble sweet treat",
        "COINMARKETCAP_API_KEY": "cmc-key-000",
    }


@pytest.fixture
def secret_bundle() -> SecretBundle:
    """Return a validated secret bundle."""
    return SecretBundle(
        mnemonic="candy maple cake sugar pudding cream honey rich smooth crumble sweet treat",
        infura_key="infura-key-789",
        etherscan_key="etherscan-key-123",
        snowtrace_key="snowtrace-key-456",
        coinmarketcap_key="cmc-key-000",
    )


@pytest.fixture
def sample_catalog() -> list:
    """Return a small catalog mixing explicit and derived endpoints."""
    return [
        NetworkDescriptor(name="mainnet", chain_id=1),
        NetworkDescriptor(name="goerli", chain_id=5, gas=8000000, gas_price=20000000000),
        NetworkDescriptor(
            name="fuji",
            chain_id=43113,
            url="https://api.avax-test.network/ext/bc/C/rpc",
        ),
    ]


@pytest.fixture
def isolated_environ(monkeypatch) -> Dict[str, str]:
    """Replace os.environ with a copy so dotenv loading cannot leak between tests."""
    environ = dict(os.environ)
    monkeypatch.setattr(os, "environ", environ)
    return environ
