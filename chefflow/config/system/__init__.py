"""
System configuration domain.

This module provides system-level configuration: application identity,
environment and logging settings.
"""

from .config import SystemConfig, Environment, LogLevel

__all__ = [
    'SystemConfig',
    'Environment',
    'LogLevel'
]
