"""API client and authentication."""

from .auth import AuthHandler
from .client import PAGE_SIZE, OpenStackClient
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigError,
    InvalidDomainError,
    LookupArgumentError,
    MissingAuthURLError,
    MissingCredentialError,
    MissingPasswordError,
    MissingTenantError,
    MissingUserError,
    OStackError,
    PermissionError,
    ResourceNotFoundError,
    UnknownCloudError,
)
from .lookup import get_flavor, get_image

__all__ = [
    "APIError",
    "AuthHandler",
    "AuthenticationError",
    "ConfigError",
    "InvalidDomainError",
    "LookupArgumentError",
    "MissingAuthURLError",
    "MissingCredentialError",
    "MissingPasswordError",
    "MissingTenantError",
    "MissingUserError",
    "OpenStackClient",
    "OStackError",
    "PAGE_SIZE",
    "PermissionError",
    "ResourceNotFoundError",
    "UnknownCloudError",
    "get_flavor",
    "get_image",
]
