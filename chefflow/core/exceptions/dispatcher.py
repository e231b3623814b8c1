"""
Dispatcher-specific exceptions for the ChefFlow kitchen queue.
"""

from .base import ValidationError
from ..enums.dispatcher import DispatchErrorCode


class CommandError(ValidationError):
    """Base exception for commands rejected by the dispatcher."""

    def __init__(self, error_code: DispatchErrorCode, field: str = "command",
                 value: str = None, message: str = None):
        self.error_code = error_code
        super().__init__(field, value, message)


class MalformedCommandError(CommandError):
    """Raised on a wrong field count or a non-numeric numeric field."""

    def __init__(self, error_code: DispatchErrorCode, field: str = "command",
                 value: str = None, message: str = None):
        super().__init__(error_code, field, value, message)


class UnknownCommandError(CommandError):
    """Raised when the command token is not recognized."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(DispatchErrorCode.UNKNOWN_COMMAND, "command", token, "unknown command")
