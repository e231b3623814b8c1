"""
Order Queue module for the ChefFlow kitchen queue.

This module provides the tiered kitchen queue (VIP > Express > Normal),
its order record and the result objects returned by its removals.
"""

from .order import Order
from .kitchen_queue import KitchenQueue
from .result_objects import QueueResult, QueueStats

__all__ = [
    'Order',
    'KitchenQueue',
    'QueueResult',
    'QueueStats'
]
