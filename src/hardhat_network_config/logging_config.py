"""Console logging setup for the hardhat-network-config command line tool."""

import logging
import os
from typing import Optional

import colorlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PACKAGE_PREFIX = "hardhat_network_config."

LOG_FORMAT = (
    "%(asctime)s %(blue)s%(name)s%(reset)s "
    "%(log_color)s%(levelname)-8s%(reset)s %(message)s"
)

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


class ModuleNameFormatter(colorlog.ColoredFormatter):
    """
    Colored formatter printing module names in a fixed-width column.

    The package prefix is dropped ("hardhat_network_config.networks" prints as
    "networks") and longer names are cut from the left.
    """

    def __init__(self, *args, name_width: int = 16, **kwargs):
        super().__init__(*args, **kwargs)
        self.name_width = name_width

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        name = record.name
        if name.startswith(PACKAGE_PREFIX):
            name = name[len(PACKAGE_PREFIX):]
        if len(name) > self.name_width:
            name = "..." + name[-(self.name_width - 3):]
        record.name = name.ljust(self.name_width)
        return super().format(record)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Send log records to stderr with colors.

    Args:
        level: One of LOG_LEVELS (defaults to $LOG_LEVEL or INFO)

    Raises:
        ValueError: If the level name is unknown
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    handler = colorlog.StreamHandler()
    handler.setFormatter(ModuleNameFormatter(LOG_FORMAT, log_colors=LOG_COLORS, style="%"))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]
