"""Path management utilities for hardhat-network-config library."""

from pathlib import Path
from typing import Optional, Union


def get_default_env_file() -> Path:
    """
    Get default dotenv file location (current project).

    Returns:
        Path to ./.env
    """
    return Path.cwd() / ".env"


def get_env_file_path(env_file: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the dotenv file path to load credentials from.

    Args:
        env_file: Custom dotenv file (defaults to ./.env)

    Returns:
        Absolute path to the dotenv file
    """
    if env_file is None:
        return get_default_env_file()
    return Path(env_file).absolute()
