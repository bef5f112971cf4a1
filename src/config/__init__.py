"""Configuration management."""

from .manager import ConfigManager
from .resolver import CredentialOptions, resolve_cloud, resolve_credentials, resolve_domain
from ..models.config import CloudConfigFile, CloudEntry, Credentials

__all__ = [
    "CloudConfigFile",
    "CloudEntry",
    "ConfigManager",
    "CredentialOptions",
    "Credentials",
    "resolve_cloud",
    "resolve_credentials",
    "resolve_domain",
]
