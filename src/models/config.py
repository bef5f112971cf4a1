"""Configuration models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DOMAIN = "Default"
DEFAULT_REGION = "RegionOne"


class CloudEntry(BaseModel):
    """Named cloud block from the config file."""

    domain: str | None = None
    authurl: str | None = None
    region: str | None = None


class CloudConfigFile(BaseModel):
    """Parsed cloud config file.

    Every top-level key holding a mapping is a named cloud. ``clouds`` and
    ``authdomains`` are optional validation lists. Keys are case-insensitive.
    """

    clouds: list[str] = Field(default_factory=list)
    authdomains: list[str] = Field(default_factory=list)
    entries: dict[str, CloudEntry] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "CloudConfigFile":
        """Build the model from a raw YAML document.

        Named cloud blocks are split from the validation lists. Values of the
        wrong shape are passed through for field validation to reject.

        Args:
            data: Raw YAML document

        Returns:
            Validated configuration

        Raises:
            ValidationError: If the document does not fit the model
        """
        fields: dict[str, Any] = {"entries": {}}
        for key, value in data.items():
            name = str(key).lower()
            if name in ("clouds", "authdomains"):
                if value is None:
                    value = []
                elif isinstance(value, str):
                    value = [value]
                fields[name] = value
            elif isinstance(value, dict):
                fields["entries"][name] = {str(k).lower(): v for k, v in value.items()}
        return cls.model_validate(fields)

    def get_entry(self, name: str) -> CloudEntry | None:
        """Look up a named cloud, ignoring case."""
        return self.entries.get(name.lower())

    def valid_cloud_names(self) -> list[str]:
        """Cloud names to suggest when a lookup fails."""
        return self.clouds or sorted(self.entries)


class Credentials(BaseModel):
    """Resolved credential set for one invocation."""

    model_config = ConfigDict(frozen=True)

    user: str
    password: str = Field(repr=False)
    tenant: str
    domain: str = DEFAULT_DOMAIN
    auth_url: str
    region: str = DEFAULT_REGION
    cloud: str | None = None

    def masked(self) -> dict[str, Any]:
        """Credential fields safe for display and logging."""
        data = self.model_dump()
        data["password"] = "********"
        return data
