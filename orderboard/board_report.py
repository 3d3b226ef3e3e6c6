"""
Board report: print the tab strip, the selected view, and the footer.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import pandas as pd

from rentdesk_core.category import Category
from rentdesk_core.order import Order
from rentdesk_core.sorting import DEFAULT_SORT, SortState
from rentdesk_core.view import build_view

from orderboard.rows import OrderRow, build_rows
from orderboard.summary import rows_frame, tab_summary

PAGE_INDICATOR = "Prev [1] Next"


def render_view(
    orders: Sequence[Order],
    category: Category | str,
    now: datetime,
    *,
    sort: SortState = DEFAULT_SORT,
) -> list[OrderRow]:
    """Filter, sort, and project orders into display rows."""
    return build_rows(build_view(orders, category, sort.key, sort.direction, now))


def print_board(
    orders: Sequence[Order],
    now: datetime,
    *,
    category: Category | str = Category.ALL,
    sort: SortState = DEFAULT_SORT,
    max_width: int = 200,
) -> list[OrderRow]:
    """
    Print the board for the selected tab and sort, and return its rows.

    Parameters
    ----------
    orders : sequence of Order
        Full snapshot; tab counts are taken over all of it.
    now : datetime
        Evaluation instant.
    category : Category or token
        Selected tab (default: all).
    sort : SortState
        Current sort selection (default: updateTime desc).
    max_width : int
        Console width handed to pandas when printing the table.

    Returns
    -------
    list of OrderRow
        The rows shown (for programmatic use).
    """
    summary = tab_summary(orders, now)
    selected = category.value if isinstance(category, Category) else str(category)
    tabs = []
    for rec in summary.to_dict(orient="records"):
        marker = "*" if rec["category"] == selected else " "
        tabs.append(f"{marker}{rec['label']}({rec['count']})")
    rows = render_view(orders, category, now, sort=sort)

    print("--- Order Board ---")
    print(" | ".join(tabs))
    print(f"Sort: {sort.key.value} {sort.direction.value}")
    if rows:
        with pd.option_context("display.width", max_width, "display.max_columns", None):
            print(rows_frame(rows).to_string(index=False))
    else:
        print("(no orders)")
    print(f"共 {len(rows)} 条    {PAGE_INDICATOR}")
    print("-------------------")
    return rows
