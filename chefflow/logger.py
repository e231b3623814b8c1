import logging
import re
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    """
    Some servers log the message a second time in the extra `color_message`, but we
    don't need it. This processor drops the key from the event dict if it exists.
    """
    event_dict.pop("color_message", None)
    return event_dict


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """
    Configure structlog for the chefflow package.

    Log records always go to stderr: stdout belongs to the command protocol.
    """
    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    # StreamHandler writes to stderr by default
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class ChefFlowStructLogger:
    """
    Structured logger for the ChefFlow package.
    Uses context variables to bind data that will be automatically included in all log messages.
    """

    def __init__(self, log_name: str = "chefflow"):
        self.logger = structlog.stdlib.get_logger(log_name)

    @staticmethod
    def _to_snake_case(name):
        """Convert CamelCase to snake_case"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def bind(self, *args, **new_values: Any):
        """
        Bind values to the logger context.

        Args:
            *args: Objects that have an 'id' attribute (bound under their snake_case class name)
            **new_values: Key-value pairs to bind to the context

        Returns:
            The logger itself, so that ``get_chefflow_logger().bind(...)`` can be chained.
        """
        for arg in args:
            if hasattr(arg, 'id'):
                key = self._to_snake_case(type(arg).__name__)
                structlog.contextvars.bind_contextvars(**{f"{key}_id": arg.id})
            else:
                self.logger.error(
                    "Unsupported argument when trying to log.",
                    invalid_argument=type(arg).__name__
                )

        structlog.contextvars.bind_contextvars(**new_values)
        return self

    @staticmethod
    def unbind(*keys: str):
        """Unbind keys from the logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_chefflow_logger(log_name: str = "chefflow") -> ChefFlowStructLogger:
    """Return a structured logger, named after the requesting component."""
    return ChefFlowStructLogger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for the chefflow package.

    Args:
        config: SystemConfig with logging settings

    Returns:
        ChefFlowStructLogger: Configured structured logger instance
    """
    # Debug mode overrides the configured level
    log_level = "DEBUG" if config.debug_mode else config.log_level.value

    setup_logging(json_logs=config.json_logs, log_level=log_level)

    return ChefFlowStructLogger("chefflow")
