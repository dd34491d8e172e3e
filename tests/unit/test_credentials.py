"""Unit tests for credential loading."""

import os
from pathlib import Path
from typing import Dict

import pytest

from hardhat_network_config.credentials import (
    SecretSource,
    load_env_file,
    load_runtime_options,
    load_secrets,
)
from hardhat_network_config.exceptions import MissingSecretError


class TestSecretSource:
    """Test the SecretSource accessor."""

    def test_require_returns_value(self):
        """Test that a set variable is returned."""
        source = SecretSource({"INFURA_KEY": "abc"})
        assert source.require("INFURA_KEY") == "abc"

    def test_require_raises_when_absent(self):
        """Test that an unset variable raises MissingSecretError."""
        source = SecretSource({})
        with pytest.raises(MissingSecretError) as exc_info:
            source.require("INFURA_KEY")
        assert exc_info.value.name == "INFURA_KEY"

    def test_require_raises_when_empty(self):
        """Test that an empty variable counts as missing."""
        source = SecretSource({"INFURA_KEY": ""})
        with pytest.raises(MissingSecretError):
            source.require("INFURA_KEY")

    def test_optional_never_raises(self):
        """Test that optional returns None or the default for unset variables."""
        source = SecretSource({})
        assert source.optional("COINMARKETCAP_API_KEY") is None
        assert source.optional("MNEMONIC", "") == ""

    def test_reads_process_environment_by_default(self, monkeypatch):
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("INFURA_KEY", "from-process")
        assert SecretSource().require("INFURA_KEY") == "from-process"


class TestLoadSecrets:
    """Test the load_secrets function."""

    def test_loads_all_values(self, secrets_environ: Dict[str, str]):
        """Test that every credential lands in the bundle."""
        secrets = load_secrets(secrets_environ)

        assert secrets.etherscan_key == "etherscan-key-123"
        assert secrets.snowtrace_key == "snowtrace-key-456"
        assert secrets.infura_key == "infura-key-789"
        assert secrets.mnemonic == secrets_environ["MNEMONIC"]
        assert secrets.coinmarketcap_key == "cmc-key-000"

    @pytest.mark.parametrize("name", ["ETHERSCAN_KEY", "SNOWTRACE_KEY", "INFURA_KEY"])
    def test_missing_required_secret_fails(self, secrets_environ: Dict[str, str], name: str):
        """Test that each mandatory credential is enforced."""
        del secrets_environ[name]

        with pytest.raises(MissingSecretError) as exc_info:
            load_secrets(secrets_environ)
        assert exc_info.value.name == name

    def test_reports_first_missing_in_validation_order(self):
        """Test that ETHERSCAN_KEY is reported first when everything is missing."""
        with pytest.raises(MissingSecretError) as exc_info:
            load_secrets({})
        assert exc_info.value.name == "ETHERSCAN_KEY"

    def test_missing_mnemonic_defaults_to_empty(self, secrets_environ: Dict[str, str]):
        """Test that an unset mnemonic is not fatal."""
        del secrets_environ["MNEMONIC"]
        assert load_secrets(secrets_environ).mnemonic == ""

    def test_missing_coinmarketcap_key_is_none(self, secrets_environ: Dict[str, str]):
        """Test that the pricing key is optional."""
        del secrets_environ["COINMARKETCAP_API_KEY"]
        assert load_secrets(secrets_environ).coinmarketcap_key is None

    def test_repr_hides_values(self, secrets_environ: Dict[str, str]):
        """Test that credentials are not echoed by repr."""
        text = repr(load_secrets(secrets_environ))
        for value in secrets_environ.values():
            assert value not in text

    def test_secrets_are_not_logged(self, secrets_environ: Dict[str, str], caplog):
        """Test that no credential value reaches the log."""
        del secrets_environ["MNEMONIC"]
        with caplog.at_level("DEBUG"):
            load_secrets(secrets_environ)

        for value in secrets_environ.values():
            assert value not in caplog.text


class TestLoadRuntimeOptions:
    """Test the load_runtime_options function."""

    def test_defaults(self):
        """Test defaults with an empty environment."""
        options = load_runtime_options({})
        assert options.active_network is None
        assert options.report_gas is False

    def test_reads_active_network(self):
        """Test that NETWORK selects the active network."""
        assert load_runtime_options({"NETWORK": "fuji"}).active_network == "fuji"

    def test_empty_active_network_is_none(self):
        """Test that an empty NETWORK means no active network."""
        assert load_runtime_options({"NETWORK": ""}).active_network is None

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("false", False), ("True", False), ("1", False), ("", False)],
    )
    def test_report_gas_only_for_exact_true(self, value: str, expected: bool):
        """Test that environment booleans are compared as strings."""
        assert load_runtime_options({"REPORT_GAS": value}).report_gas is expected


class TestLoadEnvFile:
    """Test the load_env_file function."""

    def test_loads_variables_from_file(self, sample_env_file: Path, isolated_environ):
        """Test that dotenv variables reach os.environ."""
        assert load_env_file(sample_env_file) is True

        assert os.environ["HNC_TEST_ETHERSCAN_KEY"] == "file-etherscan"
        assert os.environ["HNC_TEST_INFURA_KEY"] == "file-infura"
        assert os.environ["HNC_TEST_MNEMONIC"].endswith("junk")

    def test_does_not_override_existing_variables(
        self, sample_env_file: Path, isolated_environ
    ):
        """Test that process values win over the file."""
        os.environ["HNC_TEST_INFURA_KEY"] = "from-process"

        load_env_file(sample_env_file)

        assert os.environ["HNC_TEST_INFURA_KEY"] == "from-process"

    def test_missing_file_is_not_an_error(self, tmp_path: Path, isolated_environ):
        """Test that a missing dotenv file is skipped."""
        assert load_env_file(tmp_path / "absent.env") is False

    def test_defaults_to_env_in_current_directory(
        self, tmp_path: Path, monkeypatch, isolated_environ
    ):
        """Test that ./.env is used when no path is given."""
        (tmp_path / ".env").write_text("HNC_TEST_DEFAULT=from-cwd\n")
        monkeypatch.chdir(tmp_path)

        assert load_env_file() is True
        assert os.environ["HNC_TEST_DEFAULT"] == "from-cwd"
