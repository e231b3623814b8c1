"""
Queue-specific exceptions for the ChefFlow kitchen queue.

The queue itself reports failures through ``QueueResult``; these are raised
only when a caller asks for it via ``QueueResult.raise_for_error``.
"""

from .base import ChefFlowError
from ..enums.queue import QueueErrorCode


class QueueError(ChefFlowError):
    """Base exception for queue-related errors."""

    def __init__(self, message: str, error_code: QueueErrorCode):
        self.error_code = error_code
        super().__init__(message)


class EmptyQueueError(QueueError):
    """Raised when an operation needs at least one queued order."""

    def __init__(self, operation: str = None):
        self.operation = operation
        message = "Kitchen queue is empty"
        if operation:
            message += f", cannot {operation}"
        super().__init__(message, QueueErrorCode.EMPTY_QUEUE)


class OrderNotFoundError(QueueError):
    """Raised when no queued order carries the requested id."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order not found with ID {order_id}", QueueErrorCode.NOT_FOUND)
