"""
Core exceptions for the ChefFlow kitchen queue.

This module provides all exception classes used throughout the system,
organized by domain and with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    ChefFlowError,
    ValidationError,
    ConfigurationError
)

# Queue exceptions
from .queue import (
    QueueError,
    EmptyQueueError,
    OrderNotFoundError
)

# Dispatcher exceptions
from .dispatcher import (
    CommandError,
    MalformedCommandError,
    UnknownCommandError
)

__all__ = [
    # Base exceptions
    'ChefFlowError',
    'ValidationError',
    'ConfigurationError',

    # Queue exceptions
    'QueueError',
    'EmptyQueueError',
    'OrderNotFoundError',

    # Dispatcher exceptions
    'CommandError',
    'MalformedCommandError',
    'UnknownCommandError'
]
