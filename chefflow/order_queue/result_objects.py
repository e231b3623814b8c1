"""
Result objects for kitchen queue operations.

The queue reports failed removals through these objects instead of raising,
so a caller always sees either a completed operation or an untouched queue.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any

from chefflow.core.enums import QueueErrorCode
from chefflow.core.exceptions import EmptyQueueError, OrderNotFoundError
from .order import Order


@dataclass
class QueueResult:
    """
    Outcome of a removal from the kitchen queue.
    """
    success: bool
    operation: str

    # The removed order, when there was one
    order: Optional[Order] = None

    # Error information
    error_code: QueueErrorCode = QueueErrorCode.NO_ERROR
    error_message: Optional[str] = None

    # Queue length once the operation has run
    queue_length: int = 0

    # Requested order id (cancel / complete by id)
    order_id: Optional[int] = None

    @classmethod
    def removed(cls, operation: str, order: Order, queue_length: int) -> 'QueueResult':
        return cls(
            success=True,
            operation=operation,
            order=order,
            queue_length=queue_length,
            order_id=order.id
        )

    @classmethod
    def empty_queue(cls, operation: str, order_id: Optional[int] = None) -> 'QueueResult':
        return cls(
            success=False,
            operation=operation,
            error_code=QueueErrorCode.EMPTY_QUEUE,
            error_message="No orders in queue",
            queue_length=0,
            order_id=order_id
        )

    @classmethod
    def not_found(cls, operation: str, order_id: int, queue_length: int) -> 'QueueResult':
        return cls(
            success=False,
            operation=operation,
            error_code=QueueErrorCode.NOT_FOUND,
            error_message=f"Order {order_id} is not in the queue",
            queue_length=queue_length,
            order_id=order_id
        )

    @property
    def is_empty_queue(self) -> bool:
        return self.error_code is QueueErrorCode.EMPTY_QUEUE

    @property
    def is_not_found(self) -> bool:
        return self.error_code is QueueErrorCode.NOT_FOUND

    def raise_for_error(self) -> 'QueueResult':
        """
        Raise the matching queue exception if the operation failed.

        Returns
        -------
        QueueResult
            The result itself when the operation succeeded.

        Raises
        ------
        EmptyQueueError
            The queue held no orders.
        OrderNotFoundError
            No queued order carries the requested id.
        """
        if self.is_empty_queue:
            raise EmptyQueueError(self.operation.replace("_", " "))
        if self.is_not_found:
            raise OrderNotFoundError(self.order_id)
        return self


@dataclass
class QueueStats:
    """
    Point-in-time statistics over the queued orders.
    """
    total_orders: int = 0
    vip_orders: int = 0
    express_orders: int = 0
    normal_orders: int = 0
    total_prep_time: int = 0

    @property
    def avg_prep_time(self) -> int:
        """Average prep time, rounded half up. Zero for an empty queue."""
        if self.total_orders == 0:
            return 0
        average = Decimal(self.total_prep_time) / Decimal(self.total_orders)
        return int(average.quantize(Decimal('1'), rounding=ROUND_HALF_UP))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_orders': self.total_orders,
            'vip_orders': self.vip_orders,
            'express_orders': self.express_orders,
            'normal_orders': self.normal_orders,
            'total_prep_time': self.total_prep_time,
            'avg_prep_time': self.avg_prep_time
        }
