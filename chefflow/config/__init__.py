"""
Configuration management system with domain-based architecture.

This module provides a domain-based configuration system with:
- System-level settings and logging
- Line protocol settings for the command dispatcher
- Core registry and provider infrastructure
"""

# Core infrastructure
from .core import ConfigRegistry, ConfigProvider, FileConfigProvider, OverrideConfigProvider

# Domain configurations
from .system import SystemConfig, Environment, LogLevel
from .dispatcher import DispatcherConfig


# Convenience functions
def get_config_registry(config_dir: str = "settings") -> ConfigRegistry:
    """Create a configuration registry with the system and dispatcher domains."""
    registry = ConfigRegistry(config_dir)
    registry.register_domain("system", SystemConfig)
    registry.register_domain("dispatcher", DispatcherConfig)
    return registry


def get_system_config(registry: ConfigRegistry = None) -> SystemConfig:
    """Load the system configuration."""
    if registry is None:
        registry = get_config_registry()
    return registry.get_config("system")


def get_dispatcher_config(registry: ConfigRegistry = None) -> DispatcherConfig:
    """Load the dispatcher configuration."""
    if registry is None:
        registry = get_config_registry()
    return registry.get_config("dispatcher")


__all__ = [
    # Core infrastructure
    'ConfigRegistry',
    'ConfigProvider',
    'FileConfigProvider',
    'OverrideConfigProvider',

    # System domain
    'SystemConfig',
    'Environment',
    'LogLevel',

    # Dispatcher domain
    'DispatcherConfig',

    # Convenience functions
    'get_config_registry',
    'get_system_config',
    'get_dispatcher_config'
]
