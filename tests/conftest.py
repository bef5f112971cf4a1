"""Shared fixtures."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from ostack.models.config import CloudConfigFile, Credentials

OS_VARS = (
    "OS_USERNAME",
    "OS_PASSWORD",
    "OS_PROJECT_NAME",
    "OS_USER_DOMAIN_NAME",
    "OS_AUTH_URL",
)

SAMPLE_CONFIG = {
    "clouds": ["bob", "alice"],
    "authdomains": ["Default", "corp"],
    "bob": {
        "domain": "corp",
        "authurl": "https://bob.example.com:5000/v3",
        "region": "RegionTwo",
    },
    "alice": {
        "authurl": "https://alice.example.com:5000/v3",
    },
}


class FakeResource:
    """Stand-in for an SDK resource."""

    def __init__(self, **attrs: Any) -> None:
        self._attrs = attrs
        self.name = attrs.get("name")
        self.id = attrs.get("id")

    def to_dict(self, computed: bool = True) -> dict[str, Any]:
        return dict(self._attrs)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear OS_* variables and keep config discovery inside tmp_path."""
    for name in OS_VARS:
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return tmp_path


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "clouds.yaml"
    path.write_text(yaml.safe_dump(SAMPLE_CONFIG))
    return path


@pytest.fixture
def cloud_config() -> CloudConfigFile:
    return CloudConfigFile.from_document(SAMPLE_CONFIG)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        user="bob",
        password="secret",
        tenant="demo",
        domain="Default",
        auth_url="https://keystone.example.com:5000/v3",
    )
