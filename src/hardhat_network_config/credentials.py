"""Credential and switch loading from the process environment."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from .constants import (
    ACTIVE_NETWORK_ENV,
    COINMARKETCAP_KEY_ENV,
    ETHERSCAN_KEY_ENV,
    INFURA_KEY_ENV,
    MNEMONIC_ENV,
    REPORT_GAS_ENV,
    REQUIRED_SECRETS,
    SNOWTRACE_KEY_ENV,
)
from .exceptions import MissingSecretError
from .paths import get_env_file_path
from .types import RuntimeOptions, SecretBundle

logger = logging.getLogger(__name__)


class SecretSource:
    """Read-only accessor over an environment mapping."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Args:
            environ: Variables to read from (defaults to os.environ)
        """
        self._environ = os.environ if environ is None else environ

    def require(self, name: str) -> str:
        """
        Return a mandatory value.

        Raises:
            MissingSecretError: If the variable is unset or empty
        """
        value = self._environ.get(name)
        if not value:
            raise MissingSecretError(name)
        return value

    def optional(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return a value that may be absent, never raising."""
        value = self._environ.get(name)
        if value is None:
            return default
        return value

    def validate(self) -> None:
        """
        Check every mandatory credential is present.

        Raises:
            MissingSecretError: For the first missing variable, in validation order
        """
        for name in REQUIRED_SECRETS:
            self.require(name)


def load_env_file(env_file: Optional[Union[Path, str]] = None) -> bool:
    """
    Load a dotenv file into os.environ without overriding set variables.

    Args:
        env_file: Path to the dotenv file (defaults to ./.env)

    Returns:
        True if the file existed and defined variables, False otherwise
    """
    path = get_env_file_path(env_file)
    if not path.is_file():
        logger.debug(f"No dotenv file at {path}")
        return False

    logger.debug(f"Loading environment from {path}")
    return load_dotenv(path, override=False)


def load_secrets(environ: Optional[Mapping[str, str]] = None) -> SecretBundle:
    """
    Read and validate all credentials.

    Validation happens before anything is read into the bundle, so a missing
    key stops startup before any network is resolved.

    Args:
        environ: Variables to read from (defaults to os.environ)

    Returns:
        SecretBundle with the mnemonic defaulting to "" when unset

    Raises:
        MissingSecretError: If ETHERSCAN_KEY, SNOWTRACE_KEY or INFURA_KEY is missing
    """
    source = SecretSource(environ)
    source.validate()

    mnemonic = source.optional(MNEMONIC_ENV, "")
    if not mnemonic:
        logger.warning(f"{MNEMONIC_ENV} not set; networks will use an empty mnemonic")

    return SecretBundle(
        mnemonic=mnemonic,
        infura_key=source.require(INFURA_KEY_ENV),
        etherscan_key=source.require(ETHERSCAN_KEY_ENV),
        snowtrace_key=source.require(SNOWTRACE_KEY_ENV),
        coinmarketcap_key=source.optional(COINMARKETCAP_KEY_ENV),
    )


def load_runtime_options(environ: Optional[Mapping[str, str]] = None) -> RuntimeOptions:
    """
    Read the non-secret switches.

    Args:
        environ: Variables to read from (defaults to os.environ)

    Returns:
        RuntimeOptions; gas reporting is on only for the exact string "true"
    """
    source = SecretSource(environ)
    active_network = source.optional(ACTIVE_NETWORK_ENV) or None
    report_gas = source.optional(REPORT_GAS_ENV, "false") == "true"
    return RuntimeOptions(active_network=active_network, report_gas=report_gas)
