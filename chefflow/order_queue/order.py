from dataclasses import dataclass

from chefflow.core.enums import OrderTier


@dataclass(frozen=True)
class Order:
    """
    A kitchen order waiting in the queue.

    Parameters
    ----------
    id : int
        Caller-supplied identifier. Uniqueness is not enforced.
    items : str
        Free text describing what to prepare.
    prep_time : int
        Expected preparation time, the sort key inside the VIP and NORMAL tiers.
    tier : OrderTier
        Priority class, computed once when the order is created.
    is_express : bool
        The express flag as supplied by the caller. A VIP order keeps it,
        although it has no effect on the order's position.
    """
    id: int
    items: str
    prep_time: int
    tier: OrderTier = OrderTier.NORMAL
    is_express: bool = False

    @classmethod
    def new_order(cls, order_id: int, items: str, prep_time: int,
                  is_vip: bool = False, is_express: bool = False) -> 'Order':
        """Build an order, classifying it from the vip/express flags."""
        return cls(
            id=order_id,
            items=items,
            prep_time=prep_time,
            tier=OrderTier.classify(is_vip, is_express),
            is_express=is_express
        )

    @property
    def is_vip(self) -> bool:
        return self.tier is OrderTier.VIP

    @property
    def queue_key(self) -> tuple[int, int]:
        """
        Position key of the order inside the kitchen queue.

        Express orders share a single key so that they keep arrival order.
        """
        if self.tier is OrderTier.EXPRESS:
            return (self.tier.rank, 0)
        return (self.tier.rank, self.prep_time)

    def __str__(self):
        return "%s order %s (%s, prep %s)" % (
            self.tier.name, self.id, self.items, self.prep_time
        )
