"""
Configuration providers.

A provider supplies one configuration domain (``system``, ``dispatcher``)
as its dataclass. The raw settings come from a YAML file, optionally
overlaid with values set at runtime (command line flags).
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Type, TypeVar, Generic
from pathlib import Path
import yaml

from chefflow.core.exceptions import ConfigurationError
from chefflow.logger import get_chefflow_logger

T = TypeVar('T')


class ConfigProvider(ABC, Generic[T]):
    """
    Base class for configuration providers.

    Subclasses implement ``load`` and return the raw settings mapping;
    keys they leave out fall back to the dataclass defaults.
    """

    def __init__(self, domain: str, config_class: Type[T]):
        self.domain = domain
        self.config_class = config_class
        self.logger = get_chefflow_logger(f"chefflow.config.{domain}")

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Raw settings for this domain."""
        pass

    def get_config(self) -> T:
        """Build the domain dataclass from the current settings."""
        return self.config_class.from_dict(self.load())


class FileConfigProvider(ConfigProvider[T]):
    """
    Reads ``<config_dir>/<domain>.yaml``.

    A missing file means defaults. The parsed mapping is cached until the
    file's modification time changes. An unreadable file is logged and
    treated as missing; a file that parses to anything but a mapping is a
    ConfigurationError.
    """

    def __init__(self, domain: str, config_class: Type[T], config_dir: str = "settings"):
        super().__init__(domain, config_class)
        self.config_dir = Path(config_dir)
        self._cache: Dict[str, Any] = {}
        self._mtime: Optional[float] = None

    @property
    def config_file(self) -> Path:
        return self.config_dir / f"{self.domain}.yaml"

    def load(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            self._cache, self._mtime = {}, None
            return {}

        try:
            mtime = self.config_file.stat().st_mtime
            if mtime != self._mtime:
                with open(self.config_file, 'r') as f:
                    data = yaml.safe_load(f)
                self._cache = self._check_mapping(data)
                self._mtime = mtime
                self.logger.debug("Config file loaded", file=str(self.config_file), keys=sorted(self._cache))
        except (OSError, yaml.YAMLError) as e:
            self.logger.error("Unreadable config file, using defaults", file=str(self.config_file), error=str(e))
            self._cache, self._mtime = {}, None

        return dict(self._cache)

    def _check_mapping(self, data: Any) -> Dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                self.domain, type(data).__name__, f"{self.config_file} must hold a mapping of settings"
            )
        return data


class OverrideConfigProvider(ConfigProvider[T]):
    """
    Lays runtime values over another provider of the same domain.
    Overrides win over whatever the wrapped provider returns.
    """

    def __init__(self, base: ConfigProvider[T], overrides: Optional[Dict[str, Any]] = None):
        super().__init__(base.domain, base.config_class)
        self.base = base
        self.overrides: Dict[str, Any] = dict(overrides or {})

    def load(self) -> Dict[str, Any]:
        settings = self.base.load()
        settings.update(self.overrides)
        return settings
