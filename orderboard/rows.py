"""
Display rows: one flat, store-local record per order for the board table.

Times owned by the pickup leg (and order-level times) use the pickup
store's zone; the return time uses the return store's zone.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from rentdesk_core.cross_store import is_cross_store
from rentdesk_core.order import ConfirmType, Order, OrderStatus
from rentdesk_core.timefmt import PLACEHOLDER, format_store_time

STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "待确认",
    OrderStatus.CONFIRMED: "已确认",
    OrderStatus.PICKED_UP: "已取车",
    OrderStatus.RETURNED: "已还车",
    OrderStatus.COMPLETED: "已完成",
    OrderStatus.CANCELED: "已取消",
}

CONFIRM_TYPE_LABELS: dict[ConfirmType, str] = {
    ConfirmType.INSTANT: "立即确认",
    ConfirmType.SECONDARY: "二次确认",
}

AWAITING_CONFIRMATION = "待处理"


class RowAction(Enum):
    """Buttons offered on a row. Performing them is the backend's job."""

    VIEW = "查看"
    CONFIRM = "立即确认"
    REJECT = "拒单"
    ASSIGN_VEHICLE = "分配车辆"
    REMARKS = "订单备注"
    REGISTER_PICKUP = "登记取车"
    REGISTER_RETURN = "登记还车"


_STATUS_ACTIONS: dict[OrderStatus, tuple[RowAction, ...]] = {
    OrderStatus.PENDING: (RowAction.CONFIRM, RowAction.REJECT),
    OrderStatus.CONFIRMED: (RowAction.ASSIGN_VEHICLE, RowAction.REMARKS, RowAction.REGISTER_PICKUP),
    OrderStatus.PICKED_UP: (RowAction.REGISTER_RETURN,),
}


def row_actions(status: OrderStatus) -> tuple[RowAction, ...]:
    """VIEW plus whatever the status allows."""
    return (RowAction.VIEW,) + _STATUS_ACTIONS.get(status, ())


def format_amount(amount: float, currency: str) -> str:
    """'39.2 USD', '300 USD': whole amounts drop the decimal part."""
    value = float(amount)
    text = str(int(value)) if value.is_integer() else repr(value)
    return f"{text} {currency}".strip()


@dataclass(frozen=True)
class OrderRow:
    """Display-ready view of one order."""

    order_id: str
    confirmation_no: str
    platform_order_no: str
    source: str
    status: OrderStatus
    status_label: str
    confirm_type_label: str | None
    created_local: str
    confirm_note: str | None
    car_model: str
    actual_car: str | None
    cross_store_badge: str | None
    pickup_store_name: str
    pickup_local: str
    return_store_name: str
    return_local: str
    customer_name: str
    amount_text: str
    payment_status: str
    remarks: str
    updated_local: str
    canceled_local: str | None
    actions: tuple[RowAction, ...]


def build_row(order: Order) -> OrderRow:
    """Project an order onto its display row."""
    pickup_tz = order.pickup_store.time_zone
    return_tz = order.return_store.time_zone

    if order.confirm_time:
        confirm_note = format_store_time(order.confirm_time, pickup_tz)
    elif order.status is OrderStatus.PENDING:
        confirm_note = AWAITING_CONFIRMATION
    else:
        confirm_note = None

    canceled_local = None
    if order.status is OrderStatus.CANCELED and order.cancel_time:
        canceled_local = format_store_time(order.cancel_time, pickup_tz)

    badge = None
    if is_cross_store(order):
        badge = order.actual_car_current_store.name

    return OrderRow(
        order_id=order.id,
        confirmation_no=order.id.rjust(8, "0") if order.id else PLACEHOLDER,
        platform_order_no=order.platform_order_no,
        source=order.source,
        status=order.status,
        status_label=STATUS_LABELS[order.status],
        confirm_type_label=CONFIRM_TYPE_LABELS.get(order.confirm_type) if order.confirm_type else None,
        created_local=format_store_time(order.create_time, pickup_tz),
        confirm_note=confirm_note,
        car_model=order.car_model,
        actual_car=order.actual_car or None,
        cross_store_badge=badge,
        pickup_store_name=order.pickup_store.name,
        pickup_local=format_store_time(order.pickup_time, pickup_tz),
        return_store_name=order.return_store.name,
        return_local=format_store_time(order.return_time, return_tz),
        customer_name=order.customer_name,
        amount_text=format_amount(order.amount, order.currency),
        payment_status=order.payment_status,
        remarks=order.remarks or PLACEHOLDER,
        updated_local=format_store_time(order.update_time, pickup_tz),
        canceled_local=canceled_local,
        actions=row_actions(order.status),
    )


def build_rows(orders: Iterable[Order]) -> list[OrderRow]:
    return [build_row(o) for o in orders]
