"""
rentdesk-core: deterministic classification and sorting for a rental order board.

No persistence, UI, or network. Pure read-side views over an order snapshot.
"""

__version__ = "0.1.0"

from rentdesk_core.store import Store
from rentdesk_core.order import ConfirmType, Order, OrderStatus
from rentdesk_core.timefmt import format_store_time, is_next_24_hours, parse_instant
from rentdesk_core.category import Category, classify
from rentdesk_core.cross_store import is_cross_store
from rentdesk_core.sorting import DEFAULT_SORT, SortDirection, SortKey, SortState, sort_orders
from rentdesk_core.view import build_view, count_all

__all__ = [
    "Store",
    "Order",
    "OrderStatus",
    "ConfirmType",
    "format_store_time",
    "is_next_24_hours",
    "parse_instant",
    "Category",
    "classify",
    "is_cross_store",
    "SortKey",
    "SortDirection",
    "SortState",
    "DEFAULT_SORT",
    "sort_orders",
    "build_view",
    "count_all",
]
