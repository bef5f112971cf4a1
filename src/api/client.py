"""OpenStack API client."""

import logging
from typing import Any, Callable, Iterable

from openstack import exceptions as sdk_exceptions
from openstack.connection import Connection

from .auth import AuthHandler
from .exceptions import (
    APIError,
    PermissionError,
    ResourceNotFoundError,
)
from ..models.config import Credentials

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


class OpenStackClient:
    """Client for the compute flavor and image APIs."""

    def __init__(self, credentials: Credentials) -> None:
        """Initialize OpenStack client.

        Args:
            credentials: Resolved credential set
        """
        self.credentials = credentials
        self.auth_handler = AuthHandler(credentials)
        self._conn: Connection | None = None

    def __enter__(self) -> "OpenStackClient":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def connect(self) -> None:
        """Authenticate and keep the connection for later calls."""
        self._conn = self.auth_handler.authenticate()

    def close(self) -> None:
        """Close the connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def _ensure_connected(self) -> Connection:
        """Ensure client is connected.

        Returns:
            SDK connection

        Raises:
            RuntimeError: If not connected
        """
        if not self._conn:
            raise RuntimeError("Client not connected. Use with or call connect().")
        return self._conn

    def _call(self, resource: str, identifier: str, func: Callable[[], Any]) -> Any:
        """Run an SDK call, translating its exceptions.

        Args:
            resource: Resource type for error messages
            identifier: Id or name being looked up ("" for listings)
            func: Zero-argument callable doing the SDK work

        Returns:
            Whatever ``func`` returns

        Raises:
            ResourceNotFoundError: On 404
            PermissionError: On 403
            APIError: On any other SDK error
        """
        try:
            return func()
        except sdk_exceptions.NotFoundException:
            raise ResourceNotFoundError(resource, identifier)
        except sdk_exceptions.ForbiddenException as e:
            raise PermissionError(f"Permission denied: {e}")
        except sdk_exceptions.HttpException as e:
            raise APIError(str(e), status_code=e.status_code)
        except sdk_exceptions.SDKException as e:
            raise APIError(f"Unexpected error: {e}")

    @staticmethod
    def _to_dict(record: Any) -> dict[str, Any]:
        return record.to_dict(computed=False)

    def _match_name(self, resource: str, name: str, records: Iterable[Any]) -> dict[str, Any]:
        """Pick the single record whose name equals ``name`` exactly."""
        matches = [r for r in records if r.name == name]
        if not matches:
            raise ResourceNotFoundError(resource, name)
        if len(matches) > 1:
            raise APIError(f"multiple {resource}s match name '{name}'")
        return self._to_dict(matches[0])

    # Flavor operations

    def list_flavors(self) -> list[dict[str, Any]]:
        """List public flavors.

        Returns:
            Flavor records
        """
        conn = self._ensure_connected()
        logger.debug("Listing flavors (page size %d)", PAGE_SIZE)
        flavors = self._call(
            "flavor",
            "",
            lambda: list(conn.compute.flavors(details=True, is_public=True, limit=PAGE_SIZE)),
        )
        return [self._to_dict(f) for f in flavors]

    def get_flavor_by_id(self, flavor_id: str) -> dict[str, Any]:
        """Get a flavor by id.

        Args:
            flavor_id: Flavor id

        Returns:
            Flavor record
        """
        conn = self._ensure_connected()
        flavor = self._call("flavor", flavor_id, lambda: conn.compute.get_flavor(flavor_id))
        return self._to_dict(flavor)

    def get_flavor_by_name(self, name: str) -> dict[str, Any]:
        """Get a flavor by exact (case-sensitive) name.

        Args:
            name: Flavor name

        Returns:
            Flavor record
        """
        conn = self._ensure_connected()
        flavors = self._call(
            "flavor",
            name,
            lambda: list(conn.compute.flavors(details=True, limit=PAGE_SIZE)),
        )
        return self._match_name("flavor", name, flavors)

    # Image operations

    def list_images(self) -> list[dict[str, Any]]:
        """List images visible to the tenant.

        Returns:
            Image records
        """
        conn = self._ensure_connected()
        logger.debug("Listing images (page size %d)", PAGE_SIZE)
        images = self._call("image", "", lambda: list(conn.image.images(limit=PAGE_SIZE)))
        return [self._to_dict(i) for i in images]

    def get_image_by_id(self, image_id: str) -> dict[str, Any]:
        """Get an image by id.

        Args:
            image_id: Image id

        Returns:
            Image record
        """
        conn = self._ensure_connected()
        image = self._call("image", image_id, lambda: conn.image.get_image(image_id))
        return self._to_dict(image)

    def get_image_by_name(self, name: str) -> dict[str, Any]:
        """Get an image by exact (case-sensitive) name.

        Args:
            name: Image name

        Returns:
            Image record
        """
        conn = self._ensure_connected()
        images = self._call(
            "image",
            name,
            lambda: list(conn.image.images(name=name, limit=PAGE_SIZE)),
        )
        return self._match_name("image", name, images)
