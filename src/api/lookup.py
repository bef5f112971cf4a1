"""Id-or-name dispatch for single resource lookups."""

from typing import Any

from .client import OpenStackClient
from .exceptions import LookupArgumentError


def get_flavor(client: OpenStackClient, flavor_id: str | None, name: str | None) -> dict[str, Any]:
    """Get a flavor by id, falling back to name.

    The id wins when both are given. Client errors propagate unchanged.

    Raises:
        LookupArgumentError: If neither id nor name is given
    """
    if flavor_id:
        return client.get_flavor_by_id(flavor_id)
    if name:
        return client.get_flavor_by_name(name)
    raise LookupArgumentError("flavor")


def get_image(client: OpenStackClient, image_id: str | None, name: str | None) -> dict[str, Any]:
    """Get an image by id, falling back to name."""
    if image_id:
        return client.get_image_by_id(image_id)
    if name:
        return client.get_image_by_name(name)
    raise LookupArgumentError("image")
