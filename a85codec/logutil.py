"""Logging helpers for the a85codec package."""

import logging

PACKAGE_LOGGER = "a85codec"

# Library code never configures handlers; applications do.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance under the package logger
    """
    return logging.getLogger(name)
