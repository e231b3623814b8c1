"""
Queue-related enums for the ChefFlow kitchen queue.
"""

from enum import Enum


class OrderTier(Enum):
    """
    Priority class of a kitchen order.

    The value is the tier rank: lower ranks are served first.
    """
    VIP = 0
    EXPRESS = 1
    NORMAL = 2

    @property
    def rank(self) -> int:
        return self.value

    @classmethod
    def classify(cls, is_vip: bool, is_express: bool) -> 'OrderTier':
        """Derive the tier from the two order flags. VIP wins over express."""
        if is_vip:
            return cls.VIP
        if is_express:
            return cls.EXPRESS
        return cls.NORMAL


class QueueErrorCode(Enum):
    """Standardized error codes for queue operations."""
    NO_ERROR = "no_error"
    EMPTY_QUEUE = "empty_queue"
    NOT_FOUND = "not_found"
