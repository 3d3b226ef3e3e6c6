"""
Sorting by timestamp fields, and the sort-selection state machine.

The sort is stable in both directions: equal keys keep input order.
Absent or unparseable values sort as the Unix epoch.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from rentdesk_core.order import Order
from rentdesk_core.timefmt import EPOCH, try_parse_instant


class SortKey(Enum):
    CREATE_TIME = "createTime"
    PICKUP_TIME = "pickupTime"
    RETURN_TIME = "returnTime"
    UPDATE_TIME = "updateTime"

    @property
    def field(self) -> str:
        """Order attribute holding this key's instant."""
        return _SORT_FIELDS[self]


_SORT_FIELDS: dict[SortKey, str] = {
    SortKey.CREATE_TIME: "create_time",
    SortKey.PICKUP_TIME: "pickup_time",
    SortKey.RETURN_TIME: "return_time",
    SortKey.UPDATE_TIME: "update_time",
}


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortState:
    """
    Current sort selection. Held by the caller; the core only reads it.
    """

    key: SortKey = SortKey.UPDATE_TIME
    direction: SortDirection = SortDirection.DESC

    def select(self, key: SortKey | str) -> SortState:
        """Reselecting the active key flips direction; a new key starts descending."""
        key = SortKey(key)
        if key is self.key:
            return SortState(key=key, direction=self.direction.flipped())
        return SortState(key=key, direction=SortDirection.DESC)


DEFAULT_SORT = SortState()


def sort_instant(order: Order, key: SortKey) -> datetime:
    """Point in time used for ordering; epoch when absent or malformed."""
    return try_parse_instant(getattr(order, key.field)) or EPOCH


def sort_orders(
    orders: Iterable[Order],
    key: SortKey | str,
    direction: SortDirection | str = SortDirection.DESC,
) -> list[Order]:
    """
    Return a new list of orders sorted by the instant in key.

    Raises ValueError for a key or direction token outside the closed sets.
    """
    key = SortKey(key)
    direction = SortDirection(direction)
    return sorted(
        orders,
        key=lambda o: sort_instant(o, key),
        reverse=direction is SortDirection.DESC,
    )
