"""
Tab summary and row tables as DataFrames.

Counts always come from the full collection, whatever tab is selected.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict
from datetime import datetime

import pandas as pd

from rentdesk_core.category import Category
from rentdesk_core.order import Order
from rentdesk_core.view import count_all

from orderboard.rows import OrderRow

ROW_COLUMNS = (
    "confirmation_no",
    "platform_order_no",
    "source",
    "status_label",
    "created_local",
    "car_model",
    "actual_car",
    "cross_store_badge",
    "pickup_store_name",
    "pickup_local",
    "return_store_name",
    "return_local",
    "customer_name",
    "amount_text",
    "payment_status",
    "remarks",
    "updated_local",
)


def tab_summary(orders: Sequence[Order], now: datetime) -> pd.DataFrame:
    """
    One row per category in tab order.

    Returns
    -------
    pd.DataFrame
        Columns category (token), label, count; indexed 0..7.
    """
    counts = count_all(orders, now)
    return pd.DataFrame(
        [
            {"category": c.value, "label": c.label, "count": counts[c]}
            for c in Category
        ],
        columns=["category", "label", "count"],
    )


def rows_frame(rows: Sequence[OrderRow]) -> pd.DataFrame:
    """Flatten display rows into a DataFrame, one row per order, in view order."""
    records = []
    for row in rows:
        record = {k: v for k, v in asdict(row).items() if k in ROW_COLUMNS}
        record["actions"] = " / ".join(a.value for a in row.actions)
        records.append(record)
    return pd.DataFrame(records, columns=[*ROW_COLUMNS, "actions"])
