"""
Load stores and orders from CSV or DataFrame for the board.

Column names may be camelCase (as exported by the order backend) or
snake_case. Orders reference stores by id.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd

from rentdesk_core.order import Order
from rentdesk_core.store import Store

logger = logging.getLogger(__name__)

STORE_COLUMNS = ("id", "name", "time_zone")
ORDER_REQUIRED = (
    "id",
    "platform_order_no",
    "status",
    "create_time",
    "update_time",
    "pickup_time",
    "pickup_store_id",
    "return_time",
    "return_store_id",
    "car_model",
)
ORDER_OPTIONAL = (
    "customer_name",
    "currency",
    "payment_status",
    "source",
    "cancel_time",
    "confirm_time",
    "confirm_type",
    "actual_car",
    "contact",
    "remarks",
)


def _snake(name: str) -> str:
    name = str(name).strip()
    name = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name)
    return re.sub(r"[\s\-]+", "_", name).lower()


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Ensure columns are snake_case; map common aliases to canonical names."""
    out = df.copy()
    out.columns = [_snake(c) for c in out.columns]
    renames = {
        "timezone": "time_zone",
        "tz": "time_zone",
        "order_id": "id",
        "platform_order_number": "platform_order_no",
        "pickup_store": "pickup_store_id",
        "return_store": "return_store_id",
        "actual_car_current_store": "actual_car_store_id",
        "actual_car_current_store_id": "actual_car_store_id",
    }
    out = out.rename(columns={k: v for k, v in renames.items() if k in out.columns})
    return out


def _cell(row: Mapping[str, Any], column: str) -> Any:
    """Cell value, with NaN and empty strings read as absent."""
    value = row.get(column)
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _text(value: Any) -> str | None:
    """Ids read back from a frame can arrive as numbers; keep them as text."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def load_stores_dataframe(df: pd.DataFrame) -> dict[str, Store]:
    """
    Build the store lookup from a DataFrame with id, name, time_zone columns.

    Returns
    -------
    dict of str -> Store
        Stores keyed by id.
    """
    out = _normalize_columns(df)
    missing = [c for c in STORE_COLUMNS if c not in out.columns]
    if missing:
        raise ValueError(f"Store data missing columns: {missing}")
    stores: dict[str, Store] = {}
    for i, row in enumerate(out.to_dict(orient="records")):
        store_id = _text(_cell(row, "id"))
        if store_id is None:
            raise ValueError(f"Store data row {i}: blank id")
        store = Store(
            id=store_id,
            name=_text(_cell(row, "name")) or "",
            time_zone=_text(_cell(row, "time_zone")) or "",
        )
        stores[store.id] = store
    logger.debug("Loaded %d stores", len(stores))
    return stores


def _resolve_store(stores: Mapping[str, Store], store_id: str | None, order_id: str, column: str) -> Store:
    if store_id is None or store_id not in stores:
        raise ValueError(f"Order {order_id}: unknown store {store_id!r} in {column}")
    return stores[store_id]


def _parse_amount(value: Any, order_id: str) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Order {order_id}: amount {value!r} is not a number") from None


def load_orders_dataframe(df: pd.DataFrame, stores: Mapping[str, Store]) -> list[Order]:
    """
    Build orders from a DataFrame, resolving store ids against stores.

    Parameters
    ----------
    df : pd.DataFrame
        One row per order. Instants are kept as the raw strings supplied.
    stores : mapping of str -> Store
        Store lookup (e.g. from load_stores_dataframe).

    Returns
    -------
    list of Order
        In row order. An unknown pickup/return store raises ValueError; an
        unknown vehicle store is logged and left absent.
    """
    out = _normalize_columns(df)
    missing = [c for c in ORDER_REQUIRED if c not in out.columns]
    if missing:
        raise ValueError(f"Order data missing columns: {missing}")

    orders: list[Order] = []
    for row in out.to_dict(orient="records"):
        order_id = _text(_cell(row, "id")) or ""
        car_store = None
        car_store_id = _text(_cell(row, "actual_car_store_id"))
        if car_store_id is not None:
            car_store = stores.get(car_store_id)
            if car_store is None:
                logger.warning("Order %s: unknown vehicle store %r; ignoring", order_id, car_store_id)
        amount = _parse_amount(_cell(row, "amount"), order_id)
        optional = {c: _text(_cell(row, c)) for c in ORDER_OPTIONAL}
        orders.append(
            Order(
                id=order_id,
                platform_order_no=_text(_cell(row, "platform_order_no")) or "",
                status=_text(_cell(row, "status")),
                create_time=_text(_cell(row, "create_time")),
                update_time=_text(_cell(row, "update_time")),
                pickup_time=_text(_cell(row, "pickup_time")),
                pickup_store=_resolve_store(stores, _text(_cell(row, "pickup_store_id")), order_id, "pickup_store_id"),
                return_time=_text(_cell(row, "return_time")),
                return_store=_resolve_store(stores, _text(_cell(row, "return_store_id")), order_id, "return_store_id"),
                car_model=_text(_cell(row, "car_model")) or "",
                customer_name=optional["customer_name"] or "",
                amount=amount,
                currency=optional["currency"] or "",
                payment_status=optional["payment_status"] or "",
                source=optional["source"] or "",
                cancel_time=optional["cancel_time"],
                confirm_time=optional["confirm_time"],
                confirm_type=optional["confirm_type"],
                actual_car=optional["actual_car"],
                actual_car_current_store=car_store,
                contact=optional["contact"],
                remarks=optional["remarks"],
            )
        )
    logger.info("Loaded %d orders", len(orders))
    return orders


def load_orders_csv(
    path: str | Path,
    stores: Mapping[str, Store] | str | Path,
) -> list[Order]:
    """
    Load orders from a CSV file.

    Parameters
    ----------
    path : str or Path
        Path to the orders CSV.
    stores : mapping of str -> Store, or str or Path
        Store lookup, or a path to a stores CSV (id, name, timeZone).
    """
    if isinstance(stores, (str, Path)):
        stores = load_stores_dataframe(pd.read_csv(stores, dtype=str, keep_default_na=False))
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    return load_orders_dataframe(df, stores)
