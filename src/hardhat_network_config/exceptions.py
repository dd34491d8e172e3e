"""Custom exception classes for hardhat-network-config library."""


class ConfigError(Exception):
    """Base exception for configuration-related errors."""

    pass


class MissingSecretError(ConfigError, ValueError):
    """Raised when a required credential is absent from the environment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required environment variable: {name}")
