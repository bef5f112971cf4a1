"""Configuration inspection commands."""

import typer
from rich.panel import Panel

from ..api.exceptions import OStackError
from ..models.config import Credentials
from ..utils import console, create_table, format_value, print_error, print_info
from ..utils.helpers import ordered_group
from ._shared import get_state

app = typer.Typer(
    help="Inspect the cloud configuration",
    no_args_is_help=True,
    cls=ordered_group(["show", "clouds"]),
)


def _render_credentials_panel(credentials: Credentials, source: str) -> Panel:
    """Build a Rich Panel for resolved credentials."""
    data = credentials.masked()
    lines = []
    lines.append("[bold]── Cloud ──[/bold]")
    lines.append(f"[bold]Name:[/bold]        {format_value(data['cloud'])}")
    lines.append(f"[bold]Auth URL:[/bold]    {data['auth_url']}")
    lines.append(f"[bold]Region:[/bold]      {data['region']}")
    lines.append(f"[bold]Domain:[/bold]      {data['domain']}")

    lines.append("")
    lines.append("[bold]── Credentials ──[/bold]")
    lines.append(f"[bold]User:[/bold]        {data['user']}")
    lines.append(f"[bold]Password:[/bold]    {data['password']}")
    lines.append(f"[bold]Tenant:[/bold]      {data['tenant']}")

    lines.append("")
    lines.append(f"[dim]Config file: {source}[/dim]")

    return Panel("\n".join(lines), title="Resolved configuration", border_style="blue")


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Show the resolved credentials without contacting the cloud."""
    state = get_state(ctx)

    try:
        credentials = state.credentials()
        used = state.config_manager.used
        console.print(_render_credentials_panel(credentials, str(used) if used else "none"))

    except OStackError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command("clouds")
def list_clouds(ctx: typer.Context) -> None:
    """List the named clouds from the config file."""
    state = get_state(ctx)

    try:
        config = state.config

        if not config.entries:
            print_info("No clouds configured")
            return

        table = create_table(
            title="Configured Clouds",
            columns=[("Cloud", "cyan"), ("Auth URL", ""), ("Domain", ""), ("Region", "")],
        )
        for name in sorted(config.entries):
            entry = config.entries[name]
            table.add_row(
                name,
                format_value(entry.authurl),
                format_value(entry.domain),
                format_value(entry.region),
            )

        console.print(table)

        if config.authdomains:
            print_info(f"Allowed domains: {', '.join(config.authdomains)}")

    except OStackError as e:
        print_error(str(e))
        raise typer.Exit(1)
