"""
System domain configuration classes.
"""

from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum

from chefflow.core.exceptions import ConfigurationError


class Environment(Enum):
    """Environment types."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class SystemConfig:
    """
    Main system configuration class.

    Holds the application identity, the runtime environment and the
    settings consumed by ``chefflow.logger.init_logger``.
    """

    # Basic settings
    name: str = "ChefFlow Kitchen Queue"
    version: str = "2.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug_mode: bool = False

    # Logging
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'name': self.name,
            'version': self.version,
            'environment': self.environment.value,
            'debug_mode': self.debug_mode,
            'log_level': self.log_level.value,
            'json_logs': self.json_logs
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SystemConfig':
        """Create configuration from dictionary."""
        config = cls()

        config.name = data.get('name', config.name)
        config.version = str(data.get('version', config.version))

        if 'environment' in data:
            try:
                config.environment = Environment(data['environment'])
            except ValueError:
                raise ConfigurationError('environment', str(data['environment']), "unknown environment")

        config.debug_mode = bool(data.get('debug_mode', config.debug_mode))

        if 'log_level' in data:
            try:
                config.log_level = LogLevel(str(data['log_level']).upper())
            except ValueError:
                raise ConfigurationError('log_level', str(data['log_level']), "unknown log level")

        config.json_logs = bool(data.get('json_logs', config.json_logs))

        return config
