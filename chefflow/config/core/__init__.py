"""
Core configuration management components.

This module provides the foundational components for configuration management:
- ConfigRegistry: Central registry for domain configurations
- ConfigProvider: Abstract provider interface and implementations
"""

from .registry import ConfigRegistry
from .provider import ConfigProvider, FileConfigProvider, OverrideConfigProvider

__all__ = [
    # Registry
    'ConfigRegistry',

    # Providers
    'ConfigProvider',
    'FileConfigProvider',
    'OverrideConfigProvider'
]
