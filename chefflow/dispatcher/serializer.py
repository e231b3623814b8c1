"""
JSON rendering of queue state for the line protocol.
"""

import json
from typing import Any, Dict, Iterable

from chefflow.core.enums import DispatchErrorCode
from chefflow.order_queue import Order, QueueStats

COMPACT_SEPARATORS = (",", ":")


def order_to_dict(order: Order) -> Dict[str, Any]:
    return {
        "id": order.id,
        "items": order.items,
        "isVip": order.is_vip,
        "isExpress": order.is_express,
        "prepTime": order.prep_time,
    }


def stats_to_dict(stats: QueueStats) -> Dict[str, Any]:
    return {
        "totalOrders": stats.total_orders,
        "vipOrders": stats.vip_orders,
        "expressOrders": stats.express_orders,
        "normalOrders": stats.normal_orders,
        "totalPrepTime": stats.total_prep_time,
        "avgPrepTime": stats.avg_prep_time,
    }


def _dumps(payload: Any, compact: bool) -> str:
    if compact:
        return json.dumps(payload, separators=COMPACT_SEPARATORS)
    return json.dumps(payload)


def render_snapshot(orders: Iterable[Order], compact: bool = True) -> str:
    """Render the queue front to back as a single-line JSON array."""
    return _dumps([order_to_dict(order) for order in orders], compact)


def render_stats(stats: QueueStats, compact: bool = True) -> str:
    return _dumps(stats_to_dict(stats), compact)


def render_error(reason: DispatchErrorCode | str) -> str:
    if isinstance(reason, DispatchErrorCode):
        reason = reason.value
    return f"ERROR:{reason}"
