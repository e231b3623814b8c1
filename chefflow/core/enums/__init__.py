"""
Core enums for the ChefFlow kitchen queue.

This module provides all enum classes used throughout the system,
organized by domain for better maintainability.
"""

# Queue enums
from .queue import (
    OrderTier,
    QueueErrorCode
)

# Dispatcher enums
from .dispatcher import (
    CommandType,
    DispatchErrorCode
)

__all__ = [
    # Queue enums
    'OrderTier',
    'QueueErrorCode',

    # Dispatcher enums
    'CommandType',
    'DispatchErrorCode'
]
