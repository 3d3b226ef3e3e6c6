"""
Order: a rental reservation as seen by the board.

Immutable snapshot. Status transitions happen in the order-management
backend; the core only reads the current value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from rentdesk_core.store import Store

# ISO 8601 string as supplied, or an already-parsed datetime.
Instant = str | datetime


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PICKED_UP = "PICKED_UP"
    RETURNED = "RETURNED"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


class ConfirmType(Enum):
    INSTANT = "INSTANT"
    SECONDARY = "SECONDARY"


@dataclass(frozen=True)
class Order:
    """
    One rental order. Pickup and return legs each carry their own store,
    whose time zone is used to render that leg's times.
    """

    id: str
    platform_order_no: str
    status: OrderStatus
    create_time: Instant
    update_time: Instant
    pickup_time: Instant
    pickup_store: Store
    return_time: Instant
    return_store: Store
    car_model: str
    customer_name: str = ""
    amount: float = 0.0
    currency: str = ""
    payment_status: str = ""
    source: str = ""
    cancel_time: Instant | None = None
    confirm_time: Instant | None = None
    confirm_type: ConfirmType | None = None
    actual_car: str | None = None
    actual_car_current_store: Store | None = None
    contact: str | None = None
    remarks: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.status, OrderStatus):
            object.__setattr__(self, "status", OrderStatus(str(self.status).upper()))
        if self.confirm_type is not None and not isinstance(self.confirm_type, ConfirmType):
            object.__setattr__(self, "confirm_type", ConfirmType(str(self.confirm_type).upper()))
