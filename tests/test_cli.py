"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from ostack import __version__
from ostack.api.exceptions import AuthenticationError, ResourceNotFoundError
from ostack.cli.main import app

runner = CliRunner()


def _text(result) -> str:
    """Command output with rich line wrapping undone."""
    return " ".join(result.output.split())


AUTH = [
    "--auth-url",
    "https://keystone.example.com:5000/v3",
    "-u",
    "bob",
    "-p",
    "secret",
    "-t",
    "demo",
]

FLAVORS = [
    {"id": "1", "name": "m1.tiny", "vcpus": 1, "ram": 512, "disk": 1, "is_public": True},
    {"id": "2", "name": "m1.big", "vcpus": 8, "ram": 16384, "disk": 160, "is_public": True},
]

IMAGES = [
    {"id": "i-1", "name": "cirros", "status": "active", "min_disk": 1, "min_ram": 64, "os_distro": "cirros"},
]


@pytest.fixture
def client_cls():
    with patch("ostack.cli._shared.OpenStackClient") as client_cls:
        client = client_cls.return_value
        client.list_flavors.return_value = FLAVORS
        client.list_images.return_value = IMAGES
        client.get_flavor_by_id.return_value = FLAVORS[0]
        client.get_flavor_by_name.return_value = FLAVORS[1]
        client.get_image_by_id.return_value = IMAGES[0]
        client.get_image_by_name.return_value = IMAGES[0]
        yield client_cls


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestList:
    def test_list_flavors(self, client_cls):
        result = runner.invoke(app, AUTH + ["list", "flavors"])
        assert result.exit_code == 0, result.output
        assert "m1.tiny" in result.output
        assert "m1.big" in result.output
        client = client_cls.return_value
        client.connect.assert_called_once_with()
        client.close.assert_called_once_with()

    def test_flavor_alias(self, client_cls):
        result = runner.invoke(app, AUTH + ["list", "flavor"])
        assert result.exit_code == 0, result.output
        assert "m1.tiny" in result.output

    def test_list_images(self, client_cls):
        result = runner.invoke(app, AUTH + ["list", "images"])
        assert result.exit_code == 0, result.output
        assert "cirros" in result.output
        assert "os_distro" not in result.output

    def test_list_images_all_fields(self, client_cls):
        result = runner.invoke(app, AUTH + ["list", "images", "--all"])
        assert result.exit_code == 0, result.output
        assert "os_distro" in result.output

    def test_empty_listing(self, client_cls):
        client_cls.return_value.list_images.return_value = []
        result = runner.invoke(app, AUTH + ["list", "images"])
        assert result.exit_code == 0
        assert "No images found" in _text(result)

    def test_credentials_passed_to_client(self, client_cls):
        runner.invoke(app, AUTH + ["-d", "corp", "list", "flavors"])
        credentials = client_cls.call_args.args[0]
        assert credentials.user == "bob"
        assert credentials.tenant == "demo"
        assert credentials.domain == "corp"
        assert credentials.auth_url == "https://keystone.example.com:5000/v3"

    def test_environment_credentials(self, client_cls, monkeypatch):
        monkeypatch.setenv("OS_USERNAME", "alice")
        monkeypatch.setenv("OS_PASSWORD", "pw")
        monkeypatch.setenv("OS_PROJECT_NAME", "ops")
        monkeypatch.setenv("OS_AUTH_URL", "https://env.example.com/v3")
        result = runner.invoke(app, ["list", "flavors"])
        assert result.exit_code == 0, result.output
        credentials = client_cls.call_args.args[0]
        assert credentials.user == "alice"
        assert credentials.domain == "Default"


class TestGet:
    def test_get_flavor_by_id(self, client_cls):
        result = runner.invoke(app, AUTH + ["get", "flavor", "--id", "1", "--name", "m1.big"])
        assert result.exit_code == 0, result.output
        assert "m1.tiny" in result.output
        client = client_cls.return_value
        client.get_flavor_by_id.assert_called_once_with("1")
        client.get_flavor_by_name.assert_not_called()

    def test_get_flavor_by_name(self, client_cls):
        result = runner.invoke(app, AUTH + ["get", "flavor", "--name", "m1.big"])
        assert result.exit_code == 0, result.output
        assert "16384" in result.output
        client_cls.return_value.get_flavor_by_id.assert_not_called()

    def test_get_flavor_requires_id_or_name(self, client_cls):
        result = runner.invoke(app, AUTH + ["get", "flavor"])
        assert result.exit_code == 1
        assert "one of flavor id or name is required" in _text(result)
        client_cls.assert_not_called()

    def test_get_image_by_name(self, client_cls):
        result = runner.invoke(app, AUTH + ["get", "image", "--name", "cirros"])
        assert result.exit_code == 0, result.output
        assert "active" in result.output
        client_cls.return_value.get_image_by_name.assert_called_once_with("cirros")

    def test_get_image_not_found(self, client_cls):
        client_cls.return_value.get_image_by_id.side_effect = ResourceNotFoundError("image", "x")
        result = runner.invoke(app, AUTH + ["get", "image", "--id", "x"])
        assert result.exit_code == 1
        assert "image 'x' not found" in _text(result)


class TestConfigErrors:
    def test_missing_auth_url(self, client_cls):
        result = runner.invoke(app, ["-u", "bob", "-p", "pw", "-t", "demo", "list", "flavors"])
        assert result.exit_code == 1
        assert "no OS_AUTH_URL set" in _text(result)
        client_cls.assert_not_called()

    def test_missing_tenant(self, client_cls):
        result = runner.invoke(app, AUTH[:-2] + ["list", "flavors"])
        assert result.exit_code == 1
        assert "No tenant name was provided" in _text(result)

    def test_unknown_cloud(self, client_cls, config_path):
        result = runner.invoke(
            app, ["--cloudconfig", str(config_path), "-c", "carol"] + AUTH + ["list", "images"]
        )
        assert result.exit_code == 1
        assert "unknown cloud name: carol" in _text(result)

    def test_invalid_domain(self, client_cls, config_path):
        result = runner.invoke(
            app, ["--cloudconfig", str(config_path), "-c", "bob", "-d", "evil"] + AUTH + ["list", "images"]
        )
        assert result.exit_code == 1
        assert "invalid domain: evil" in _text(result)

    def test_authentication_failure(self, client_cls):
        client_cls.return_value.connect.side_effect = AuthenticationError("bad credentials")
        result = runner.invoke(app, AUTH + ["list", "flavors"])
        assert result.exit_code == 1
        assert "bad credentials" in _text(result)


class TestConfigCommands:
    def test_show(self, config_path):
        result = runner.invoke(app, ["--cloudconfig", str(config_path), "-c", "bob"] + AUTH[2:] + ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "bob.example.com" in result.output
        assert "RegionTwo" in result.output
        assert "corp" in result.output
        assert "secret" not in result.output

    def test_clouds(self, config_path):
        result = runner.invoke(app, ["--cloudconfig", str(config_path), "config", "clouds"])
        assert result.exit_code == 0, result.output
        assert "alice" in result.output
        assert "bob" in result.output

    def test_clouds_without_config(self):
        result = runner.invoke(app, ["config", "clouds"])
        assert result.exit_code == 0
        assert "No clouds configured" in _text(result)

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["--cloudconfig", str(tmp_path / "nope.yaml"), "config", "clouds"])
        assert result.exit_code == 1
        assert "Config file not found" in _text(result)
