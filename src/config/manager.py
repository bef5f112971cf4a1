"""Cloud config file discovery and loading."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..api.exceptions import ConfigError
from ..models.config import CloudConfigFile

logger = logging.getLogger(__name__)

CONFIG_NAMES = (".cloudconfig.yaml", ".cloudconfig.yml")


class ConfigManager:
    """Locate and load the ostack cloud config file."""

    def __init__(
        self,
        config_file: Path | None = None,
        search_dirs: list[Path] | None = None,
    ) -> None:
        """Initialize config manager.

        Args:
            config_file: Explicit config file path (``--cloudconfig``)
            search_dirs: Directories searched when no explicit path is given
                (defaults to the current directory, then the home directory)
        """
        self.config_file = config_file
        if search_dirs is None:
            search_dirs = [Path.cwd(), Path.home()]
        self.search_dirs = search_dirs
        self._config: CloudConfigFile | None = None
        self._used: Path | None = None

    @property
    def used(self) -> Path | None:
        """Path of the config file that was loaded, if any."""
        return self._used

    def locate(self) -> Path | None:
        """Find the config file to read.

        Returns:
            Path to the config file, or None if none was found

        Raises:
            ConfigError: If an explicit config file does not exist
        """
        if self.config_file is not None:
            if not self.config_file.is_file():
                raise ConfigError(f"Config file not found at {self.config_file}")
            return self.config_file

        for directory in self.search_dirs:
            for name in CONFIG_NAMES:
                candidate = directory / name
                if candidate.is_file():
                    return candidate
        return None

    def load(self) -> CloudConfigFile:
        """Load configuration from file.

        Returns:
            Loaded configuration (empty if no file was found)

        Raises:
            ConfigError: If the config file is invalid
        """
        path = self.locate()
        if path is None:
            logger.debug("No cloud config file found in %s", [str(d) for d in self.search_dirs])
            self._config = CloudConfigFile()
            return self._config

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read config file {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        try:
            self._config = CloudConfigFile.from_document(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {path}: {e}")

        self._used = path
        logger.info("Using cloud config file: %s", path)
        return self._config

    def get(self) -> CloudConfigFile:
        """Get current configuration, loading if necessary.

        Returns:
            Current configuration
        """
        if self._config is None:
            self._config = self.load()
        return self._config
