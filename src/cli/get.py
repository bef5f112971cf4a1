"""Get commands for single flavors and images."""

import typer

from ..api.exceptions import LookupArgumentError, OStackError
from ..api.lookup import get_flavor, get_image
from ..utils import console, print_error, render_record
from ..utils.helpers import ordered_group
from ._shared import get_state

app = typer.Typer(
    help="Get an object of type flavor or image",
    no_args_is_help=True,
    cls=ordered_group(["flavor", "image"]),
)


@app.command("flavor")
def get_flavor_cmd(
    ctx: typer.Context,
    flavor_id: str = typer.Option(None, "--id", help="The ID of the desired flavor"),
    name: str = typer.Option(None, "--name", help="The name of the desired flavor"),
) -> None:
    """Get a flavor by id or name."""
    state = get_state(ctx)

    try:
        # Fail before authenticating when there is nothing to look up.
        if not flavor_id and not name:
            raise LookupArgumentError("flavor")

        flavor = get_flavor(state.client(), flavor_id, name)
        console.print(render_record(flavor, title=f"Flavor: {flavor.get('name') or flavor.get('id')}"))

    except OStackError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command("image")
def get_image_cmd(
    ctx: typer.Context,
    image_id: str = typer.Option(None, "--id", help="The ID of the desired image"),
    name: str = typer.Option(None, "--name", help="The name of the desired image"),
) -> None:
    """Get an image by id or name."""
    state = get_state(ctx)

    try:
        if not image_id and not name:
            raise LookupArgumentError("image")

        image = get_image(state.client(), image_id, name)
        console.print(render_record(image, title=f"Image: {image.get('name') or image.get('id')}"))

    except OStackError as e:
        print_error(str(e))
        raise typer.Exit(1)
