"""
Categories (tabs) and the classifier that decides membership.

Categories overlap: an order is tested against each one independently.
Every rule reads the evaluation instant from the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum

from rentdesk_core.order import Order, OrderStatus
from rentdesk_core.timefmt import LOOKAHEAD, is_next_24_hours, parse_instant, try_parse_instant

logger = logging.getLogger(__name__)


class Category(Enum):
    ALL = "all"
    PENDING = "pending"
    NEW_24H = "new_24h"
    PICKUP_NEXT_24H = "pickup_next_24h"
    RETURN_TODAY = "return_today"
    OVERDUE_PICKUP = "overdue_pickup"
    OVERDUE_RETURN = "overdue_return"
    CANCELED = "canceled"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[Category, str] = {
    Category.ALL: "全部",
    Category.PENDING: "待确认",
    Category.NEW_24H: "近24小时新增预订",
    Category.PICKUP_NEXT_24H: "未来24小时待取车",
    Category.RETURN_TODAY: "今日待还订单",
    Category.OVERDUE_PICKUP: "逾期待取订单",
    Category.OVERDUE_RETURN: "逾期待还订单",
    Category.CANCELED: "已取消",
}

_AWAITING_PICKUP = (OrderStatus.PENDING, OrderStatus.CONFIRMED)


def _is_before(instant, ref: datetime) -> bool:
    """True iff instant parses and is strictly earlier than ref."""
    dt = try_parse_instant(instant)
    return dt is not None and dt < ref


def classify(order: Order, category: Category | str, now: datetime) -> bool:
    """
    Whether order belongs to category at evaluation instant now.

    Accepts a Category or its token. Unknown tokens match nothing.
    """
    if not isinstance(category, Category):
        try:
            category = Category(category)
        except ValueError:
            logger.warning("Unknown category %r; treating as no match", category)
            return False
    ref = parse_instant(now)

    if category is Category.ALL:
        return True
    if category is Category.PENDING:
        return order.status is OrderStatus.PENDING
    if category is Category.NEW_24H:
        created = try_parse_instant(order.create_time)
        return created is not None and ref - created < LOOKAHEAD
    if category is Category.PICKUP_NEXT_24H:
        return order.status is not OrderStatus.CANCELED and is_next_24_hours(order.pickup_time, ref)
    if category is Category.RETURN_TODAY:
        return order.status is OrderStatus.PICKED_UP and is_next_24_hours(order.return_time, ref)
    if category is Category.OVERDUE_PICKUP:
        return order.status in _AWAITING_PICKUP and _is_before(order.pickup_time, ref)
    if category is Category.OVERDUE_RETURN:
        return order.status is OrderStatus.PICKED_UP and _is_before(order.return_time, ref)
    # Category.CANCELED
    return order.status is OrderStatus.CANCELED
