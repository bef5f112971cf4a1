"""Authentication handling for the OpenStack identity service."""

import logging
from typing import Any

import openstack
from openstack import exceptions as sdk_exceptions
from openstack.connection import Connection

from .exceptions import AuthenticationError
from ..models.config import Credentials

logger = logging.getLogger(__name__)


class AuthHandler:
    """Handle password authentication against Keystone."""

    def __init__(self, credentials: Credentials) -> None:
        """Initialize auth handler.

        Args:
            credentials: Resolved credential set
        """
        self.credentials = credentials

    def auth_payload(self) -> dict[str, Any]:
        """Build the password auth payload for the SDK.

        Returns:
            Auth dict accepted by ``openstack.connect``
        """
        return {
            "auth_url": self.credentials.auth_url,
            "username": self.credentials.user,
            "password": self.credentials.password,
            "project_name": self.credentials.tenant,
            "user_domain_name": self.credentials.domain,
            "project_domain_name": self.credentials.domain,
        }

    def authenticate(self) -> Connection:
        """Open a connection and obtain a token.

        Only the resolved credentials are used; clouds.yaml and OS_*
        variables are not consulted by the SDK.

        Returns:
            Authenticated SDK connection

        Raises:
            AuthenticationError: If authentication fails
        """
        logger.debug("Authenticating %s against %s", self.credentials.user, self.credentials.auth_url)
        try:
            conn = openstack.connect(
                auth_type="password",
                auth=self.auth_payload(),
                region_name=self.credentials.region,
                load_yaml_config=False,
                load_envvars=False,
            )
            conn.authorize()
        except sdk_exceptions.SDKException as e:
            raise AuthenticationError(
                f"Failed to establish an authenticated OpenStack client: {e}"
            )
        return conn
