"""Data models."""

from .config import (
    DEFAULT_DOMAIN,
    DEFAULT_REGION,
    CloudConfigFile,
    CloudEntry,
    Credentials,
)

__all__ = [
    "DEFAULT_DOMAIN",
    "DEFAULT_REGION",
    "CloudConfigFile",
    "CloudEntry",
    "Credentials",
]
