"""Output formatting utilities using Rich."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def print_error(msg: str) -> None:
    """Print an error message to the console.

    Args:
        msg: The error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(msg)}")


def print_info(msg: str) -> None:
    """Print an info message to the console.

    Args:
        msg: The info message to display.
    """
    console.print(f"[cyan]{escape(msg)}[/cyan]")


def create_table(
    title: str | None = None,
    columns: list[tuple[str, str]] | None = None,
    show_header: bool = True,
) -> Table:
    """Create a Rich table.

    Args:
        title: Optional table title.
        columns: List of (column_name, column_style) tuples.
        show_header: Whether to show the header row.

    Returns:
        A configured Rich Table instance.
    """
    table = Table(title=title, show_header=show_header, header_style="bold cyan")

    if columns:
        for col_name, col_style in columns:
            table.add_column(col_name, style=col_style)

    return table


def format_value(value: Any) -> str:
    """Render a record field as plain text.

    Args:
        value: Field value from an API record.

    Returns:
        Text for a table cell ('-' for empty values).
    """
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, dict):
        if not value:
            return "-"
        return ", ".join(f"{k}={format_value(v)}" for k, v in sorted(value.items()))
    if isinstance(value, (list, tuple, set)):
        if not value:
            return "-"
        return ", ".join(format_value(v) for v in value)
    return str(value)


def format_megabytes(value: int | None) -> str:
    """Format a size given in MB.

    Args:
        value: Size in megabytes.

    Returns:
        Formatted string (e.g., '512 MB', '2.0 GB').
    """
    if value is None:
        return "-"
    if value < 1024:
        return f"{value} MB"
    return f"{value / 1024:.1f} GB"


def render_record(record: dict[str, Any], title: str | None = None) -> Table:
    """Build a two-column table showing every field of a record.

    Args:
        record: Record as returned by the client.
        title: Optional table title.

    Returns:
        A Rich Table with one row per field.
    """
    table = create_table(title=title, columns=[("Field", "cyan"), ("Value", "")])
    for key in sorted(record):
        table.add_row(escape(key), escape(format_value(record[key])))
    return table
