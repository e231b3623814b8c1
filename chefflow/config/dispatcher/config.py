"""
Dispatcher domain configuration classes.

Settings for the line protocol spoken by the command dispatcher and the CLI.
"""

from dataclasses import dataclass
from typing import Dict, Any

from chefflow.core.exceptions import ConfigurationError


@dataclass
class DispatcherConfig:
    """Line protocol settings."""

    field_delimiter: str = ","
    ready_banner: str = "READY"
    emit_ready_banner: bool = True
    json_compact: bool = True

    def __post_init__(self):
        if not self.field_delimiter:
            raise ConfigurationError('field_delimiter', reason="delimiter must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'field_delimiter': self.field_delimiter,
            'ready_banner': self.ready_banner,
            'emit_ready_banner': self.emit_ready_banner,
            'json_compact': self.json_compact
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DispatcherConfig':
        """Create configuration from dictionary."""
        defaults = cls()
        return cls(
            field_delimiter=str(data.get('field_delimiter', defaults.field_delimiter)),
            ready_banner=str(data.get('ready_banner', defaults.ready_banner)),
            emit_ready_banner=bool(data.get('emit_ready_banner', defaults.emit_ready_banner)),
            json_compact=bool(data.get('json_compact', defaults.json_compact))
        )
