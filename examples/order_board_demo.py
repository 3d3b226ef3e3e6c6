"""
Order board demo using the sample orders and the CSV loader.

Demonstrates: build orders → count tabs → select tab and sort → print rows
in store-local time, with the sort toggle behaving as a header click would.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from orderboard import load_orders_csv, print_board
from rentdesk_core import DEFAULT_SORT, Category, SortKey
from rentdesk_core.examples.sample_orders import make_sample_orders


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    # Generated samples: every tab has members relative to the wall clock
    now = datetime.now(timezone.utc)
    orders = make_sample_orders(now)
    print_board(orders, now)

    # Clicking "pickup time" twice: desc, then asc
    sort = DEFAULT_SORT.select(SortKey.PICKUP_TIME).select(SortKey.PICKUP_TIME)
    print_board(orders, now, category=Category.PICKUP_NEXT_24H, sort=sort)

    # Same board from exported CSV data, evaluated at a fixed instant
    data_dir = Path(__file__).resolve().parent / "data"
    csv_orders = load_orders_csv(data_dir / "orders.csv", data_dir / "stores.csv")
    fixed_now = datetime(2024, 5, 3, 1, 0, tzinfo=timezone.utc)
    print_board(csv_orders, fixed_now, category="pickup_next_24h")


if __name__ == "__main__":
    main()
