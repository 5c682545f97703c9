"""
Chip Stock POS - console inventory and billing.

Usage (the data file is relative to the working directory):
    python -m chipstock.main                          # interactive menu
    python -m chipstock.main --data-file shop.csv     # use another backing file
    python -m chipstock.main --discount-basis total   # 5% tier judged on the bill total
    python -m chipstock.main --receipts               # also write a PDF per bill
    python -m chipstock.main --export xlsx            # write the inventory workbook and exit
    python -m chipstock.main --report --chart         # print stock summary, save chart, exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from chipstock.config import (
    APP_NAME,
    APP_VERSION,
    DATA_FILE,
    DISCOUNT_BASES,
    DISCOUNT_BASIS,
    LOG_FORMAT,
    LOG_LEVEL,
    RECEIPTS_DIR,
)
from chipstock.db.store import RecordStore
from chipstock.errors import StoreIOError
from chipstock.services.billing_service import BillingService, DiscountPolicy
from chipstock.services.export_service import ExportService
from chipstock.services.inventory_service import InventoryService
from chipstock.services.receipt_service import ReceiptService
from chipstock.services.report_service import ReportService
from chipstock.ui.console import Console
from chipstock.ui.menu import MenuApp
from chipstock.utils import money

logger = logging.getLogger("chipstock")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chipstock",
        description=f"{APP_NAME} v{APP_VERSION}: chip inventory and billing.",
    )
    ap.add_argument("--data-file",      type=Path, default=DATA_FILE,
                    help=f"Backing CSV file (default: {DATA_FILE})")
    ap.add_argument("--discount-basis", choices=DISCOUNT_BASES, default=DISCOUNT_BASIS,
                    help=f"Value the 5%% tier is judged on (default: {DISCOUNT_BASIS})")
    ap.add_argument("--receipts",       action="store_true",
                    help=f"Write a PDF receipt to {RECEIPTS_DIR}/ for every bill")
    ap.add_argument("--export",         choices=["csv", "xlsx"],
                    help="Export the inventory and exit")
    ap.add_argument("--report",         action="store_true",
                    help="Print a stock summary and exit")
    ap.add_argument("--chart",          action="store_true",
                    help="Save a stock-level chart and exit")
    ap.add_argument("-v", "--verbose",  action="store_true",
                    help="Debug logging")
    return ap


def init_store(path: Path) -> RecordStore:
    store = RecordStore(path)
    store.load()
    return store


def print_report(report: ReportService) -> None:
    s = report.summary()
    print(f"Products      : {s.record_count}")
    print(f"Units on hand : {s.total_units}")
    print(f"Deadstock     : {s.total_deadstock}")
    print(f"Stock value   : {money(s.stock_value)}")
    for label, chips in (("Low stock", s.low_stock), ("Out of stock", s.out_of_stock)):
        if chips:
            print(f"{label}:")
            for c in chips:
                print(f"   - {c.product_id}: {c.product_name} (Qty: {c.quantity})")


def run_batch(args: argparse.Namespace, store: RecordStore) -> int:
    try:
        if args.export == "csv":
            print(f"Exported to {ExportService(store).export_inventory_csv()}")
        elif args.export == "xlsx":
            print(f"Exported to {ExportService(store).export_inventory_xlsx()}")
        report = ReportService(store)
        if args.report:
            print_report(report)
        if args.chart:
            print(f"Chart saved to {report.stock_chart()}")
    except OSError as e:
        logger.error("Export failed: %s", e)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        store = init_store(args.data_file)
    except StoreIOError as e:
        logger.error("Failed to initialize data: %s", e)
        return 1

    if args.export or args.report or args.chart:
        return run_batch(args, store)

    app = MenuApp(
        Console(),
        InventoryService(store),
        BillingService(store, policy=DiscountPolicy.for_basis(args.discount_basis)),
        receipts=ReceiptService() if args.receipts else None,
    )
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
