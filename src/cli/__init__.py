"""CLI commands."""

from . import config, get, listing, main

__all__ = ["config", "get", "listing", "main"]
