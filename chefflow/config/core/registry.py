"""
Configuration registry: one provider per configuration domain.
"""

from typing import Any, Dict, Optional, Type
from pathlib import Path

from .provider import ConfigProvider, FileConfigProvider, OverrideConfigProvider
from chefflow.core.exceptions import ConfigurationError
from chefflow.logger import get_chefflow_logger


class ConfigRegistry:
    """
    Maps domain names to their configuration providers.

    Domains are registered with the dataclass that describes them and are
    read from ``<config_dir>/<domain>.yaml`` unless another provider is
    given. Nothing is ever written to the config directory.
    """

    def __init__(self, config_dir: str = "settings"):
        self.config_dir = Path(config_dir)
        self.logger = get_chefflow_logger("chefflow.config")
        self._providers: Dict[str, ConfigProvider] = {}

    def register_domain(self, domain: str, config_class: Type,
                        provider: Optional[ConfigProvider] = None) -> ConfigProvider:
        """
        Register a domain.

        Args:
            domain: Domain name, also the YAML file stem
            config_class: Dataclass with a ``from_dict`` constructor
            provider: Custom provider, defaults to a FileConfigProvider

        Returns:
            The registered provider
        """
        if provider is None:
            provider = FileConfigProvider(domain, config_class, str(self.config_dir))

        self._providers[domain] = provider
        self.logger.debug("Domain registered", domain=domain, provider_type=type(provider).__name__)
        return provider

    def get_provider(self, domain: str) -> ConfigProvider:
        try:
            return self._providers[domain]
        except KeyError:
            raise ConfigurationError(domain, reason="domain is not registered")

    def get_config(self, domain: str) -> Any:
        """The domain's dataclass, built from its current settings."""
        return self.get_provider(domain).get_config()

    def override(self, domain: str, **values: Any) -> ConfigProvider:
        """
        Overlay runtime values on a domain, e.g. from command line flags.
        Repeated calls accumulate.
        """
        provider = self.get_provider(domain)
        if not isinstance(provider, OverrideConfigProvider):
            provider = OverrideConfigProvider(provider)
            self._providers[domain] = provider

        provider.overrides.update(values)
        self.logger.debug("Config overridden", domain=domain, keys=sorted(values))
        return provider
