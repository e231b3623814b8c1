"""
Command Dispatcher module for the ChefFlow kitchen queue.

Translates the comma-separated line protocol into kitchen queue calls and
renders the outcome as a JSON snapshot or an ``ERROR:<REASON>`` line.
"""

from .command_dispatcher import CommandDispatcher, ParsedCommand
from .serializer import render_snapshot, render_stats, render_error, order_to_dict, stats_to_dict

__all__ = [
    'CommandDispatcher',
    'ParsedCommand',
    'render_snapshot',
    'render_stats',
    'render_error',
    'order_to_dict',
    'stats_to_dict'
]
