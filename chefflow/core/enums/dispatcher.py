"""
Dispatcher-related enums for the ChefFlow kitchen queue.
"""

from enum import Enum


class CommandType(Enum):
    """Commands understood by the line protocol."""
    ADD = "ADD"
    VIP = "VIP"
    COMPLETE = "COMPLETE"
    COMPLETE_ID = "COMPLETE_ID"
    CANCEL = "CANCEL"
    PRINT = "PRINT"
    STATS = "STATS"

    @classmethod
    def parse(cls, token: str) -> 'CommandType':
        """Case-insensitive lookup. Raises ValueError on unknown tokens."""
        return cls(token.strip().upper())


class DispatchErrorCode(Enum):
    """
    Reason tokens rendered as ``ERROR:<REASON>`` on the protocol.
    """
    NO_ORDERS = "NO_ORDERS"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    INVALID_ADD_FORMAT = "INVALID_ADD_FORMAT"
    INVALID_VIP_FORMAT = "INVALID_VIP_FORMAT"
    INVALID_CANCEL_FORMAT = "INVALID_CANCEL_FORMAT"
    INVALID_COMPLETE_ID_FORMAT = "INVALID_COMPLETE_ID_FORMAT"
    INVALID_NUMBER_FORMAT = "INVALID_NUMBER_FORMAT"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
