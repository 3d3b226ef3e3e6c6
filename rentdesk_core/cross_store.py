"""
Cross-store detection: the assigned vehicle sits at another store.
"""

from rentdesk_core.order import Order


def is_cross_store(order: Order) -> bool:
    """
    True iff a vehicle is assigned, its current store and the pickup store
    are both known, and they differ. A stale vehicle store without an
    assigned vehicle does not count.
    """
    if not order.actual_car:
        return False
    current = order.actual_car_current_store
    pickup = order.pickup_store
    if current is None or pickup is None:
        return False
    return current.id != pickup.id
