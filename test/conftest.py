"""
Shared pytest configuration and fixtures for the kitchen queue tests.
"""

import pytest

from chefflow.config import DispatcherConfig
from chefflow.dispatcher import CommandDispatcher
from chefflow.order_queue import KitchenQueue


@pytest.fixture
def kitchen_queue():
    """An empty kitchen queue."""
    return KitchenQueue()


@pytest.fixture
def busy_queue():
    """
    A queue holding every tier:
    VIP 3 (t=1), VIP 5 (t=4), EXPRESS 4 (t=99), EXPRESS 6 (t=2), NORMAL 2 (t=5), NORMAL 1 (t=10).
    """
    queue = KitchenQueue()
    queue.insert_normal(1, 'Steak', 10)
    queue.insert_normal(2, 'Salad', 5)
    queue.insert_vip(3, 'Soup', 1)
    queue.insert_normal(4, 'Roast', 99, is_express=True)
    queue.insert_vip(5, 'Pasta', 4)
    queue.insert_normal(6, 'Toast', 2, is_express=True)
    return queue


@pytest.fixture
def dispatcher():
    """A dispatcher owning a fresh queue, with default protocol settings."""
    return CommandDispatcher(KitchenQueue(), DispatcherConfig())
