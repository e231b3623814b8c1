"""
Command line entry point: speaks the kitchen line protocol on stdin/stdout.
"""

import argparse
import sys
from typing import Iterable, Optional, TextIO

from chefflow.config import get_config_registry, get_system_config, get_dispatcher_config
from chefflow.dispatcher import CommandDispatcher
from chefflow.logger import init_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chefflow",
        description="Tiered kitchen order queue driven by a line protocol on stdin"
    )
    parser.add_argument("--config-dir", default="settings",
                        help="Directory holding system.yaml and dispatcher.yaml")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON on stderr")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--no-banner", action="store_true", help="Do not print the ready banner")
    return parser


def serve(dispatcher: CommandDispatcher, lines: Iterable[str], out: TextIO,
          banner: Optional[str] = None) -> int:
    """
    Feed every input line to the dispatcher and write its answers to ``out``.

    Returns the number of commands answered.
    """
    if banner:
        out.write(banner + "\n")
        out.flush()

    answered = 0
    for line in lines:
        response = dispatcher.dispatch(line)
        if response is None:
            continue
        out.write(response + "\n")
        out.flush()
        answered += 1
    return answered


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    registry = get_config_registry(args.config_dir)
    # Flags win over the YAML files
    if args.debug:
        registry.override("system", debug_mode=True)
    if args.json_logs:
        registry.override("system", json_logs=True)
    if args.no_banner:
        registry.override("dispatcher", emit_ready_banner=False)

    system_config = get_system_config(registry)
    logger = init_logger(system_config)
    dispatcher_config = get_dispatcher_config(registry)

    logger.info("Kitchen queue starting", name=system_config.name, version=system_config.version,
                environment=system_config.environment.value)

    dispatcher = CommandDispatcher(config=dispatcher_config)
    banner = dispatcher_config.ready_banner if dispatcher_config.emit_ready_banner else None
    try:
        answered = serve(dispatcher, sys.stdin, sys.stdout, banner)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        return 0

    logger.info("Input closed, shutting down", commands=answered, queued_orders=len(dispatcher.queue))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
