"""
Order board presentation layer on top of rentdesk-core.

Loads orders and stores from tables, projects views into store-local
display rows, summarizes tab counts, and prints a board report.
"""

from orderboard.data_loader import load_orders_csv, load_orders_dataframe, load_stores_dataframe
from orderboard.rows import OrderRow, RowAction, build_row, build_rows
from orderboard.summary import rows_frame, tab_summary
from orderboard.board_report import print_board, render_view

__all__ = [
    "load_orders_csv",
    "load_orders_dataframe",
    "load_stores_dataframe",
    "OrderRow",
    "RowAction",
    "build_row",
    "build_rows",
    "rows_frame",
    "tab_summary",
    "print_board",
    "render_view",
]
