"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

SDK_LOGGERS = ("openstack", "keystoneauth")


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for the CLI.

    Verbose runs log at DEBUG to stdout, quiet runs log warnings to stderr.
    The OpenStack SDK loggers follow the same level.

    Args:
        verbose: Whether --verbose was given
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=not verbose),
        show_path=verbose,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(level)
