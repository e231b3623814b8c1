import re
from dataclasses import dataclass, field
from typing import List, Optional

from chefflow.config import DispatcherConfig
from chefflow.core.enums import CommandType, DispatchErrorCode, QueueErrorCode
from chefflow.core.exceptions import CommandError, MalformedCommandError, UnknownCommandError
from chefflow.logger import get_chefflow_logger
from chefflow.order_queue import KitchenQueue, QueueResult
from .serializer import render_error, render_snapshot, render_stats

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Numeric fields are 32-bit signed integers
_INT_MIN, _INT_MAX = -2 ** 31, 2 ** 31 - 1

# Error token for a line missing its fields
_FORMAT_ERRORS = {
    CommandType.ADD: DispatchErrorCode.INVALID_ADD_FORMAT,
    CommandType.VIP: DispatchErrorCode.INVALID_VIP_FORMAT,
    CommandType.CANCEL: DispatchErrorCode.INVALID_CANCEL_FORMAT,
    CommandType.COMPLETE_ID: DispatchErrorCode.INVALID_COMPLETE_ID_FORMAT,
}

_QUEUE_ERRORS = {
    QueueErrorCode.EMPTY_QUEUE: DispatchErrorCode.NO_ORDERS,
    QueueErrorCode.NOT_FOUND: DispatchErrorCode.ORDER_NOT_FOUND,
}


@dataclass
class ParsedCommand:
    """A protocol line split into its command and argument fields."""
    command: CommandType
    args: List[str] = field(default_factory=list)


class CommandDispatcher(object):
    """
    The CommandDispatcher speaks the kitchen line protocol on behalf of a
    single KitchenQueue.

    Each line is ``COMMAND[,field...]``, the command being matched
    case-insensitively:

        ADD,id,items,prepTime[,isExpress]
        VIP,id,items,prepTime[,isExpress]
        COMPLETE
        COMPLETE_ID,id
        CANCEL,id
        PRINT
        STATS

    Extra trailing fields are ignored. Every successful command answers
    with one line: the full queue as a JSON array (STATS answers with a
    JSON object). A rejected command answers with ``ERROR:<REASON>`` and
    leaves the queue as it was.
    """

    def __init__(self, queue: Optional[KitchenQueue] = None,
                 config: Optional[DispatcherConfig] = None):
        """
        Parameters
        ----------
        queue : `KitchenQueue`, optional
            The queue this dispatcher owns. A fresh one is created if None.
        config : `DispatcherConfig`, optional
            Protocol settings. Defaults are used if None.
        """
        self.queue = queue if queue is not None else KitchenQueue()
        self.config = config or DispatcherConfig()
        self.logger = get_chefflow_logger("chefflow.dispatcher")

        self._handlers = {
            CommandType.ADD: self._on_insert,
            CommandType.VIP: self._on_insert,
            CommandType.COMPLETE: self._on_complete,
            CommandType.COMPLETE_ID: self._on_remove_by_id,
            CommandType.CANCEL: self._on_remove_by_id,
            CommandType.PRINT: self._on_print,
            CommandType.STATS: self._on_stats,
        }

    def dispatch(self, line: str) -> Optional[str]:
        """
        Execute one protocol line.

        The command name, and the order it touched, are bound to the log
        context while the line is handled.

        Returns
        -------
        Optional[str]
            The response line, or None for a blank line.
        """
        try:
            parsed = self.parse_line(line)
            if parsed is None:
                return None
            self.logger.bind(command=parsed.command.value)
            return self._handlers[parsed.command](parsed)
        except CommandError as e:
            self.logger.warning("Command rejected", line=line.strip(), reason=e.error_code.value)
            return render_error(e.error_code)
        except Exception as e:
            self.logger.exception("Command failed", line=line.strip())
            return render_error(str(e))
        finally:
            self.logger.unbind("command", "order_id")

    def parse_line(self, line: str) -> Optional[ParsedCommand]:
        """
        Split a line into a ParsedCommand. Trailing empty fields are
        dropped; a blank line gives None.

        Raises
        ------
        UnknownCommandError
            The first field is not a known command.
        """
        line = line.strip()
        if not line:
            return None

        fields = line.split(self.config.field_delimiter)
        while fields and fields[-1] == "":
            fields.pop()
        if not fields:
            raise UnknownCommandError(line)

        try:
            command = CommandType.parse(fields[0])
        except ValueError:
            raise UnknownCommandError(fields[0])
        return ParsedCommand(command, fields[1:])

    # Command handlers

    def _on_insert(self, parsed: ParsedCommand) -> str:
        self._require(parsed, 3, "expected id, items and prepTime")

        order_id = self._parse_int("id", parsed.args[0])
        items = parsed.args[1]
        prep_time = self._parse_int("prepTime", parsed.args[2])
        if prep_time < 0:
            raise MalformedCommandError(
                DispatchErrorCode.INVALID_NUMBER_FORMAT, "prepTime", parsed.args[2],
                "prep time must not be negative"
            )
        is_express = len(parsed.args) > 3 and parsed.args[3].lower() == "true"

        if parsed.command is CommandType.VIP:
            order = self.queue.insert_vip(order_id, items, prep_time, is_express)
        else:
            order = self.queue.insert_normal(order_id, items, prep_time, is_express)
        self.logger.bind(order)
        self.logger.info("Order accepted", tier=order.tier.name, queue_length=len(self.queue))
        return self._snapshot()

    def _on_complete(self, parsed: ParsedCommand) -> str:
        return self._answer(self.queue.complete_front())

    def _on_remove_by_id(self, parsed: ParsedCommand) -> str:
        self._require(parsed, 1, "expected an order id")
        order_id = self._parse_int("id", parsed.args[0])

        if parsed.command is CommandType.COMPLETE_ID:
            return self._answer(self.queue.complete_by_id(order_id))
        return self._answer(self.queue.cancel_by_id(order_id))

    def _on_print(self, parsed: ParsedCommand) -> str:
        return self._snapshot()

    def _on_stats(self, parsed: ParsedCommand) -> str:
        return render_stats(self.queue.stats(), compact=self.config.json_compact)

    # Helpers

    def _answer(self, result: QueueResult) -> str:
        if not result.success:
            reason = _QUEUE_ERRORS[result.error_code]
            self.logger.warning(
                "Queue operation failed",
                operation=result.operation,
                order_id=result.order_id,
                reason=reason.value
            )
            return render_error(reason)

        self.logger.bind(result.order)
        self.logger.info("Order left the queue", operation=result.operation, queue_length=result.queue_length)
        return self._snapshot()

    def _snapshot(self) -> str:
        return render_snapshot(self.queue.snapshot(), compact=self.config.json_compact)

    @staticmethod
    def _require(parsed: ParsedCommand, count: int, message: str):
        if len(parsed.args) < count:
            raise MalformedCommandError(
                _FORMAT_ERRORS[parsed.command], value=parsed.command.value, message=message
            )

    @staticmethod
    def _parse_int(name: str, raw: str) -> int:
        """Parse a 32-bit signed decimal integer, without surrounding blanks."""
        if not _INTEGER.fullmatch(raw):
            raise MalformedCommandError(
                DispatchErrorCode.INVALID_NUMBER_FORMAT, name, raw, "not an integer"
            )
        value = int(raw)
        if not _INT_MIN <= value <= _INT_MAX:
            raise MalformedCommandError(
                DispatchErrorCode.INVALID_NUMBER_FORMAT, name, raw, "out of range"
            )
        return value
