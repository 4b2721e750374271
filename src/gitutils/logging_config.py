"""
Logging configuration for git-utils.

Log records go to stderr through rich so stdout stays clean for pipes.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the ``gitutils`` logger.

    Args:
        verbose: Enable DEBUG level logging. Off by default.

    Returns:
        The configured ``gitutils`` logger
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        markup=False,
    )

    logger = logging.getLogger("gitutils")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False

    return logger
