"""List commands for flavors and images."""

import typer

from ..api.exceptions import OStackError
from ..utils import (
    console,
    create_table,
    format_megabytes,
    format_value,
    print_error,
    print_info,
    render_record,
)
from ..utils.helpers import ordered_group
from ._shared import get_state

app = typer.Typer(
    help="List objects of type flavor or image",
    no_args_is_help=True,
    cls=ordered_group(["flavors", "images"]),
)


def _gigabytes(value: int | None) -> str:
    return f"{value} GB" if value is not None else "-"


@app.command("flavors")
@app.command("flavor", hidden=True)
def list_flavors(ctx: typer.Context) -> None:
    """List the flavors that are available within a tenant."""
    state = get_state(ctx)

    try:
        flavors = state.client().list_flavors()

        if not flavors:
            print_info("No flavors found")
            return

        table = create_table(
            title="Flavors",
            columns=[
                ("ID", "cyan"),
                ("Name", ""),
                ("vCPUs", ""),
                ("RAM", ""),
                ("Disk", ""),
                ("Public", "green"),
            ],
        )
        for flavor in flavors:
            table.add_row(
                format_value(flavor.get("id")),
                format_value(flavor.get("name")),
                format_value(flavor.get("vcpus")),
                format_megabytes(flavor.get("ram")),
                _gigabytes(flavor.get("disk")),
                format_value(flavor.get("is_public")),
            )

        console.print(table)

    except OStackError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command("images")
@app.command("image", hidden=True)
def list_images(
    ctx: typer.Context,
    show_all: bool = typer.Option(
        False, "--all", "-a", is_flag=True, help="If set, all fields of the image will be printed"
    ),
) -> None:
    """List the images that are available within a tenant."""
    state = get_state(ctx)

    try:
        images = state.client().list_images()

        if not images:
            print_info("No images found")
            return

        if show_all:
            for image in images:
                console.print(render_record(image, title=f"Image: {image.get('name') or image.get('id')}"))
            return

        table = create_table(
            title="Images",
            columns=[
                ("ID", "cyan"),
                ("Name", ""),
                ("Status", ""),
                ("Min Disk", ""),
                ("Min RAM", ""),
            ],
        )
        for image in images:
            table.add_row(
                format_value(image.get("id")),
                format_value(image.get("name")),
                format_value(image.get("status")),
                _gigabytes(image.get("min_disk")),
                format_megabytes(image.get("min_ram")),
            )

        console.print(table)

    except OStackError as e:
        print_error(str(e))
        raise typer.Exit(1)
