"""Credential resolution from flags, environment and the cloud config file.

Precedence for every field is: explicit flag, then environment variable,
then the named cloud entry from the config file, then a hard default (domain
and region only).
"""

import logging
from collections.abc import Mapping

from pydantic import BaseModel

from ..api.exceptions import (
    InvalidDomainError,
    MissingAuthURLError,
    MissingPasswordError,
    MissingTenantError,
    MissingUserError,
    UnknownCloudError,
)
from ..models.config import (
    DEFAULT_DOMAIN,
    DEFAULT_REGION,
    CloudConfigFile,
    CloudEntry,
    Credentials,
)

logger = logging.getLogger(__name__)

ENV_USER = "OS_USERNAME"
ENV_PASSWORD = "OS_PASSWORD"
ENV_TENANT = "OS_PROJECT_NAME"
ENV_DOMAIN = "OS_USER_DOMAIN_NAME"
ENV_AUTH_URL = "OS_AUTH_URL"


class CredentialOptions(BaseModel):
    """Raw values from the global command-line flags."""

    user: str | None = None
    password: str | None = None
    tenant: str | None = None
    domain: str | None = None
    cloud: str | None = None
    auth_url: str | None = None


def _first(*values: str | None) -> str | None:
    """Return the first non-empty value."""
    for value in values:
        if value:
            return value
    return None


def resolve_cloud(
    cloud: str | None,
    auth_url: str | None,
    config: CloudConfigFile,
) -> tuple[CloudEntry, str | None]:
    """Resolve the cloud endpoint.

    Args:
        cloud: Cloud name from ``--cloud``
        auth_url: Auth URL from ``--auth-url`` or ``OS_AUTH_URL``
        config: Loaded config file

    Returns:
        The cloud entry and the cloud name it was found under (None for an
        entry built from the auth URL alone)

    Raises:
        UnknownCloudError: If the cloud name is not configured
        MissingAuthURLError: If no cloud name and no auth URL were given
    """
    if cloud:
        entry = config.get_entry(cloud)
        if entry is None:
            raise UnknownCloudError(cloud, config.valid_cloud_names())
        return entry, cloud

    if auth_url:
        return CloudEntry(authurl=auth_url, region=DEFAULT_REGION), None

    raise MissingAuthURLError()


def resolve_domain(
    flag: str | None,
    env: Mapping[str, str],
    entry: CloudEntry | None,
    config: CloudConfigFile,
) -> str:
    """Resolve the authentication domain.

    An explicitly supplied domain is checked against ``authdomains`` when the
    config file defines one. The fallback ``Default`` is never checked.

    Raises:
        InvalidDomainError: If the domain is not in the allow-list
    """
    domain = _first(flag, env.get(ENV_DOMAIN), entry.domain if entry else None)
    if domain is None:
        return DEFAULT_DOMAIN

    if config.authdomains and domain not in config.authdomains:
        raise InvalidDomainError(domain, config.authdomains)
    return domain


def resolve_credentials(
    options: CredentialOptions,
    env: Mapping[str, str],
    config: CloudConfigFile,
) -> Credentials:
    """Build a validated credential set.

    Args:
        options: Global flag values
        env: Environment variables
        config: Loaded config file

    Returns:
        Complete credentials

    Raises:
        ConfigError: One of its subclasses, naming the first missing or
            invalid field
    """
    entry, cloud_name = resolve_cloud(
        options.cloud,
        _first(options.auth_url, env.get(ENV_AUTH_URL)),
        config,
    )
    if not entry.authurl:
        raise MissingAuthURLError()

    domain = resolve_domain(options.domain, env, entry, config)

    user = _first(options.user, env.get(ENV_USER))
    if not user:
        raise MissingUserError()

    password = _first(options.password, env.get(ENV_PASSWORD))
    if not password:
        raise MissingPasswordError()

    tenant = _first(options.tenant, env.get(ENV_TENANT))
    if not tenant:
        raise MissingTenantError()

    credentials = Credentials(
        user=user,
        password=password,
        tenant=tenant,
        domain=domain,
        auth_url=entry.authurl,
        region=entry.region or DEFAULT_REGION,
        cloud=cloud_name,
    )
    logger.info("Collected config: %s", credentials.masked())
    return credentials
