"""Main CLI application."""

from pathlib import Path

import typer
from rich.console import Console

from .. import __version__
from ..config import CredentialOptions
from ..utils import setup_logging
from . import config, get, listing
from ._shared import AppState

console = Console()

app = typer.Typer(
    name="ostack",
    help="Browse OpenStack flavors and images",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(get.app, name="get")
app.add_typer(listing.app, name="list")
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: Whether version flag was set
    """
    if value:
        console.print(f"ostack version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    cloudconfig: Path = typer.Option(
        None,
        "--cloudconfig",
        help="OpenStack cloud config file (default is ./.cloudconfig.yaml, then $HOME/.cloudconfig.yaml)",
    ),
    user: str = typer.Option(
        None,
        "--user",
        "-u",
        help="OpenStack user. If not provided, will be pulled from the OS_USERNAME env variable",
    ),
    password: str = typer.Option(
        None,
        "--password",
        "-p",
        help="OpenStack password. If not provided, will be pulled from the OS_PASSWORD env variable",
    ),
    domain: str = typer.Option(
        None,
        "--domain",
        "-d",
        help="OpenStack auth domain. If not provided, will be pulled from the OS_USER_DOMAIN_NAME "
        "env variable, then the cloud config, then 'Default'",
    ),
    cloud: str = typer.Option(
        None,
        "--cloud",
        "-c",
        help="OpenStack cloud name from the cloud config. If not provided, the OS_AUTH_URL "
        "env variable is used",
    ),
    tenant: str = typer.Option(
        None,
        "--tenant",
        "-t",
        help="OpenStack tenant name (project) for which the cmd will be executed. If not "
        "provided, will be pulled from the OS_PROJECT_NAME env variable",
    ),
    auth_url: str = typer.Option(
        None,
        "--auth-url",
        help="Keystone URL, used when no --cloud is given. Overrides OS_AUTH_URL",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", is_flag=True, help="Display verbose logging"),
    version: bool = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """ostack - OpenStack flavors and images from the command line.

    Credentials come from flags, then OS_* environment variables, then the
    named cloud in the cloud config file.

    Get started:
        ostack -c mycloud list flavors      # List flavors of a named cloud
        ostack get image --name cirros      # Show one image
        ostack --help                       # Show all available commands
    """
    setup_logging(verbose)

    options = CredentialOptions(
        user=user,
        password=password,
        tenant=tenant,
        domain=domain,
        cloud=cloud,
        auth_url=auth_url,
    )
    state = AppState(options, config_file=cloudconfig)
    ctx.obj = state
    ctx.call_on_close(state.close)


if __name__ == "__main__":
    app()
