"""Custom exceptions for ostack."""


class OStackError(Exception):
    """Base exception for ostack."""

    pass


class ConfigError(OStackError):
    """Configuration related errors."""

    pass


class UnknownCloudError(ConfigError):
    """Cloud name not present in the config file."""

    def __init__(self, name: str, valid: list[str]) -> None:
        """Initialize unknown cloud error.

        Args:
            name: Requested cloud name
            valid: Cloud names that are configured
        """
        super().__init__(
            f"unknown cloud name: {name}. valid values are {','.join(valid)}"
        )
        self.name = name
        self.valid = valid


class InvalidDomainError(ConfigError):
    """Domain not present in the configured allow-list."""

    def __init__(self, domain: str, valid: list[str]) -> None:
        super().__init__(
            f"invalid domain: {domain}. valid values are {','.join(valid)}"
        )
        self.domain = domain
        self.valid = valid


class MissingAuthURLError(ConfigError):
    """Neither a cloud name nor an auth URL was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "unable to determine cloud configuration from environment "
            "(no OS_AUTH_URL set). set it, or use the --cloud setting"
        )


class MissingCredentialError(ConfigError):
    """A required credential field is empty."""

    field = "credential"

    def __init__(self) -> None:
        super().__init__(f"No {self.field} was provided")


class MissingUserError(MissingCredentialError):
    field = "userId"


class MissingPasswordError(MissingCredentialError):
    field = "password"


class MissingTenantError(MissingCredentialError):
    field = "tenant name"


class AuthenticationError(OStackError):
    """Authentication failures."""

    pass


class LookupArgumentError(OStackError):
    """A get was requested with neither an id nor a name."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"one of {resource} id or name is required")
        self.resource = resource


class APIError(OStackError):
    """General API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.status_code = status_code


class ResourceNotFoundError(APIError):
    """Resource not found (404)."""

    def __init__(self, resource: str, identifier: str) -> None:
        """Initialize resource not found error.

        Args:
            resource: Type of resource (flavor, image)
            identifier: Resource id or name
        """
        super().__init__(f"{resource} '{identifier}' not found", status_code=404)
        self.resource = resource
        self.identifier = identifier


class PermissionError(APIError):
    """Permission denied (403)."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message, status_code=403)
