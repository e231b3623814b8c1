from bisect import bisect_right
from operator import attrgetter
from typing import Dict, Iterator, List, Optional, Tuple

from chefflow.core.enums import OrderTier
from chefflow.logger import get_chefflow_logger
from .order import Order
from .result_objects import QueueResult, QueueStats


class KitchenQueue(object):
    """
    The KitchenQueue keeps the orders of the kitchen in the sequence
    they will be prepared. The front order is the one currently being
    prepared.

    Orders are laid out in three consecutive zones:

        [VIP by prep time] [EXPRESS by arrival] [NORMAL by prep time]

    A new order is placed before the first queued order that should be
    prepared after it, i.e. after every order of a higher tier and after
    every order of its own tier with a prep time not greater than its
    own. Express orders ignore prep time, so a new express order always
    lands behind the existing express orders. Equal keys keep arrival
    order.

    Removals never raise: they return a ``QueueResult`` and leave the
    queue untouched when they fail.
    """

    def __init__(self):
        self._orders: List[Order] = []
        self.logger = get_chefflow_logger("chefflow.queue")

    # Insertion

    def insert_normal(self, order_id: int, items: str, prep_time: int,
                      is_express: bool = False) -> Order:
        """
        Queue a non-VIP order. With ``is_express`` the order joins the
        express run, otherwise it is sorted into the normal run by prep time.
        """
        order = Order.new_order(order_id, items, prep_time, is_vip=False, is_express=is_express)
        self._insert(order)
        return order

    def insert_vip(self, order_id: int, items: str, prep_time: int,
                   is_express: bool = False) -> Order:
        """
        Queue a VIP order, sorted by prep time among the VIP orders.
        """
        order = Order.new_order(order_id, items, prep_time, is_vip=True, is_express=is_express)
        self._insert(order)
        return order

    def _insert(self, order: Order) -> int:
        # Zones are sorted by queue_key, so the first strictly greater key is
        # the bisect point.
        position = bisect_right(self._orders, order.queue_key, key=attrgetter('queue_key'))
        self._orders.insert(position, order)
        self.logger.debug(
            "Order queued",
            order_id=order.id,
            tier=order.tier.name,
            prep_time=order.prep_time,
            position=position,
            queue_length=len(self._orders)
        )
        return position

    # Removal

    def complete_front(self) -> QueueResult:
        """
        Remove the order currently being prepared.
        """
        if not self._orders:
            self.logger.debug("Nothing to complete, queue is empty")
            return QueueResult.empty_queue("complete_front")

        order = self._orders.pop(0)
        self.logger.debug("Order completed", order_id=order.id, queue_length=len(self._orders))
        return QueueResult.removed("complete_front", order, len(self._orders))

    def cancel_by_id(self, order_id: int) -> QueueResult:
        """
        Remove the front-most order with the given id, wherever it sits
        in the queue.
        """
        return self._remove_by_id(order_id, "cancel_by_id")

    def complete_by_id(self, order_id: int) -> QueueResult:
        """
        Mark an arbitrary order as done. It leaves the queue exactly like
        a cancellation does.
        """
        return self._remove_by_id(order_id, "complete_by_id")

    def _remove_by_id(self, order_id: int, operation: str) -> QueueResult:
        if not self._orders:
            self.logger.debug("Queue is empty", operation=operation, order_id=order_id)
            return QueueResult.empty_queue(operation, order_id)

        position = self._index_of(order_id)
        if position is None:
            self.logger.debug("Order not in queue", operation=operation, order_id=order_id)
            return QueueResult.not_found(operation, order_id, len(self._orders))

        order = self._orders.pop(position)
        self.logger.debug(
            "Order removed",
            operation=operation,
            order_id=order_id,
            position=position,
            queue_length=len(self._orders)
        )
        return QueueResult.removed(operation, order, len(self._orders))

    def _index_of(self, order_id: int) -> Optional[int]:
        for position, order in enumerate(self._orders):
            if order.id == order_id:
                return position
        return None

    # Read access

    def snapshot(self) -> Tuple[Order, ...]:
        """Return the queued orders, front to back."""
        return tuple(self._orders)

    def front(self) -> Optional[Order]:
        """Return the order currently being prepared, if any."""
        return self._orders[0] if self._orders else None

    def find(self, order_id: int) -> Optional[Order]:
        """Return the front-most order with the given id, if any."""
        position = self._index_of(order_id)
        return None if position is None else self._orders[position]

    @property
    def is_empty(self) -> bool:
        return not self._orders

    def count_by_tier(self) -> Dict[OrderTier, int]:
        counts = {tier: 0 for tier in OrderTier}
        for order in self._orders:
            counts[order.tier] += 1
        return counts

    def stats(self) -> QueueStats:
        """Summarise the orders currently in the queue."""
        counts = self.count_by_tier()
        return QueueStats(
            total_orders=len(self._orders),
            vip_orders=counts[OrderTier.VIP],
            express_orders=counts[OrderTier.EXPRESS],
            normal_orders=counts[OrderTier.NORMAL],
            total_prep_time=sum(order.prep_time for order in self._orders)
        )

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.snapshot())

    def __repr__(self):
        return "KitchenQueue(%s)" % [order.id for order in self._orders]
