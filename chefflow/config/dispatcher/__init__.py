"""
Dispatcher configuration domain.
"""

from .config import DispatcherConfig

__all__ = [
    'DispatcherConfig'
]
