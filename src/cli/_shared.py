"""State shared by all commands of one invocation.

The root callback builds an ``AppState`` from the global flags and stores it
on the typer context. Commands that talk to the cloud ask it for a client;
credentials are resolved and the connection opened only on first use.
"""

import os
from collections.abc import Mapping
from pathlib import Path

import typer

from ..api.client import OpenStackClient
from ..config import ConfigManager, CredentialOptions, resolve_credentials
from ..models.config import CloudConfigFile, Credentials


class AppState:
    """Per-invocation configuration and client holder."""

    def __init__(
        self,
        options: CredentialOptions,
        config_file: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize state.

        Args:
            options: Global credential flags
            config_file: Explicit config file path
            env: Environment variables (defaults to os.environ)
        """
        self.options = options
        self.env = os.environ if env is None else env
        self.config_manager = ConfigManager(config_file)
        self._credentials: Credentials | None = None
        self._client: OpenStackClient | None = None

    @property
    def config(self) -> CloudConfigFile:
        return self.config_manager.get()

    def credentials(self) -> Credentials:
        """Resolve credentials once."""
        if self._credentials is None:
            self._credentials = resolve_credentials(self.options, self.env, self.config)
        return self._credentials

    def client(self) -> OpenStackClient:
        """Return the connected client, authenticating on first use."""
        if self._client is None:
            client = OpenStackClient(self.credentials())
            client.connect()
            self._client = client
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def get_state(ctx: typer.Context) -> AppState:
    """Fetch the AppState stored by the root callback."""
    state = ctx.find_object(AppState)
    if state is None:
        state = AppState(CredentialOptions())
        ctx.obj = state
    return state
