"""
View pipeline: classify → sort over a snapshot of orders, plus tab counts.

Pure functions. Nothing is cached; callers re-derive on every change to the
collection or the selection.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from rentdesk_core.category import Category, classify
from rentdesk_core.order import Order
from rentdesk_core.sorting import SortDirection, SortKey, sort_orders


def count_all(orders: Sequence[Order], now: datetime) -> dict[Category, int]:
    """Membership count per category over the full, unfiltered collection."""
    return {
        category: sum(1 for o in orders if classify(o, category, now))
        for category in Category
    }


def filter_orders(orders: Sequence[Order], category: Category | str, now: datetime) -> list[Order]:
    """Orders in category, in input order."""
    return [o for o in orders if classify(o, category, now)]


def build_view(
    orders: Sequence[Order],
    category: Category | str,
    sort_key: SortKey | str,
    direction: SortDirection | str,
    now: datetime,
) -> list[Order]:
    """
    Filter orders by category, then sort the result.

    Parameters
    ----------
    orders : sequence of Order
        Snapshot collection; not modified.
    category : Category or token
        Selected tab. An unknown token yields an empty view.
    sort_key : SortKey or token
        Timestamp field to order by.
    direction : SortDirection or token
        'asc' or 'desc'.
    now : datetime
        Evaluation instant for the time-based categories.

    Returns
    -------
    list of Order
        New list; ties keep input order.
    """
    return sort_orders(filter_orders(orders, category, now), sort_key, direction)
