from __future__ import annotations

import logging
from typing import Optional

from chipstock.config import CONTACT_INFO
from chipstock.constants import (
    MENU_OPTIONS,
    MSG_ADDED,
    MSG_DELETE_CANCELLED,
    MSG_DELETED,
    MSG_DUPLICATE_ID,
    MSG_GOODBYE,
    MSG_INPUT_CLOSED,
    MSG_INVENTORY_EMPTY,
    MSG_NOT_FOUND,
    MSG_NOT_SAVED,
    MSG_OUT_OF_STOCK,
    MSG_UPDATE_CANCELLED,
    MSG_UPDATED,
    OPT_ADD,
    OPT_BILL,
    OPT_CONTACT,
    OPT_DELETE,
    OPT_EDIT,
    OPT_EXIT,
    OPT_SEARCH,
    OPT_SHOW,
)
from chipstock.errors import InputClosed, StoreIOError
from chipstock.models.bill import Bill
from chipstock.models.product import Chip
from chipstock.models.result import Outcome
from chipstock.services.billing_service import BillingService
from chipstock.services.inventory_service import InventoryService
from chipstock.services.receipt_service import ReceiptService
from chipstock.ui.console import Console
from chipstock.ui.theme import Theme, section_title, table_header, table_row, table_rule
from chipstock.utils import money, parse_int, percent
from chipstock.validators import nonneg

logger = logging.getLogger(__name__)

NOT_NEGATIVE = "Value cannot be negative. Please try again."


class MenuApp:
    """
    Numbered console menu (0-7) over the inventory and billing services.
    run() loops until Exit or end of input and returns the process exit status.
    """

    def __init__(self, console: Console, inventory: InventoryService, billing: BillingService,
                 receipts: Optional[ReceiptService] = None):
        self.console = console
        self.inventory = inventory
        self.billing = billing
        self.receipts = receipts

        self._actions = {
            OPT_SHOW:    self.show_all,
            OPT_ADD:     self.add_product,
            OPT_SEARCH:  self.search_product,
            OPT_EDIT:    self.edit_product,
            OPT_DELETE:  self.delete_product,
            OPT_BILL:    self.generate_bill,
            OPT_CONTACT: self.contact_info,
        }

    # ── Loop ──────────────────────────────────────────────────────────────────
    def print_menu(self) -> None:
        say = self.console.say
        say()
        say(Theme.MENU_RULE)
        say(" " * 10 + "CHIP INVENTORY MANAGEMENT MENU")
        say(Theme.MENU_RULE)
        for opt in sorted(MENU_OPTIONS, key=lambda o: (o == OPT_EXIT, o)):
            say(f"{opt}. {MENU_OPTIONS[opt]}")
        say(Theme.MENU_RULE)

    def run(self) -> int:
        while True:
            self.print_menu()
            try:
                line = self.console.read("Enter your choice: ")
            except InputClosed:
                self.console.say()
                self.console.say(MSG_INPUT_CLOSED)
                return 0

            option = parse_int(line)
            if option is None or option not in MENU_OPTIONS:
                self.console.say(f"Invalid option. Please enter a number between {OPT_EXIT} and {max(MENU_OPTIONS)}.")
                continue

            if option == OPT_EXIT:
                self.console.say()
                self.console.say(MSG_GOODBYE)
                return 0

            try:
                self._actions[option]()
            except InputClosed:
                self.console.say()
                self.console.say(MSG_INPUT_CLOSED)
                return 0
            except StoreIOError as e:
                # In-memory state keeps the change; only the file is behind.
                logger.error("Save failed: %s", e)
                self.console.say(MSG_NOT_SAVED.format(path=self.inventory.store.path, error=e))

    # ── Helpers ───────────────────────────────────────────────────────────────
    def _print_table(self, chips: list[Chip]) -> None:
        self.console.say(table_header())
        for chip in chips:
            self.console.say(table_row(chip))
        self.console.say(table_rule())

    def _require_stock_records(self, action: str) -> bool:
        if self.inventory.is_empty():
            self.console.say(MSG_INVENTORY_EMPTY.format(action=action))
            return False
        return True

    def _ask_count(self, prompt: str) -> int:
        return self.console.ask_int(prompt, check=nonneg, error=NOT_NEGATIVE)

    def _ask_optional_count(self, prompt: str, current: int) -> int:
        return self.console.ask_optional_int(prompt, current, check=nonneg, error=NOT_NEGATIVE)

    # ── Actions ───────────────────────────────────────────────────────────────
    def show_all(self) -> None:
        chips = self.inventory.list_all()
        if not chips:
            rule = "--" * (Theme.TITLE_REPEAT * 2 + 1)
            self.console.say(rule)
            self.console.say("## Inventory is empty. Use the ADD option to register products.")
            self.console.say(rule)
            return

        self.console.say(section_title("CHIP INVENTORY SNAPSHOT"))
        self._print_table(chips)
        self.console.say()
        self.console.say(f" TOTAL RECORDS : {len(chips)} ")
        self.console.say()

    def add_product(self) -> None:
        self.console.say(section_title("ADD NEW PRODUCT"))

        while True:
            product_id = self.console.ask_int("Enter Product ID: ")
            if self.inventory.is_id_available(product_id):
                break
            self.console.say(MSG_DUPLICATE_ID)

        chip = Chip(
            product_id=product_id,
            product_name=self.console.ask_text("Enter Product Name: "),
            quantity=self._ask_count("Enter Quantity: "),
            seller_name=self.console.ask_text("Enter Seller Name: "),
            price=self._ask_count("Enter Price (per unit): "),
            brand_name=self.console.ask_text("Enter Brand Name: "),
            deadstock=self._ask_count("Enter Deadstock (0 if none): "),
        )

        res = self.inventory.add(chip)
        if res.outcome is Outcome.DUPLICATE:
            self.console.say(MSG_DUPLICATE_ID)
            return
        self.console.say()
        self.console.say(MSG_ADDED)
        self.console.say()

    def search_product(self) -> None:
        self.console.say(section_title("SEARCH PRODUCT FORM"))
        if not self._require_stock_records("searching"):
            return

        res = self.inventory.search(self.console.ask_int("Enter Product ID to search: "))
        if not res.ok:
            self.console.say(MSG_NOT_FOUND)
            return
        self._print_table([res.chip])

    def edit_product(self) -> None:
        self.console.say(section_title("EDIT PRODUCT DETAILS"))
        if not self._require_stock_records("editing"):
            return

        product_id = self.console.ask_int("Enter Product ID to edit: ")
        found = self.inventory.search(product_id)
        if not found.ok:
            self.console.say(MSG_NOT_FOUND)
            return
        chip = found.chip
        self._print_table([chip])

        if not self.console.ask_yes_no("Proceed to update this product? (y/n): "):
            self.console.say(MSG_UPDATE_CANCELLED)
            return

        self.console.say("Leave a field blank to keep the current value.")
        ask_text = self.console.ask_optional_text
        changes = {
            "product_name": ask_text(f"Product Name [{chip.product_name}]: ", chip.product_name),
            "quantity":     self._ask_optional_count(f"Quantity [{chip.quantity}]: ", chip.quantity),
            "seller_name":  ask_text(f"Seller Name [{chip.seller_name}]: ", chip.seller_name),
            "price":        self._ask_optional_count(f"Price [{chip.price}]: ", chip.price),
            "brand_name":   ask_text(f"Brand Name [{chip.brand_name}]: ", chip.brand_name),
            "deadstock":    self._ask_optional_count(f"Deadstock [{chip.deadstock}]: ", chip.deadstock),
        }
        self.inventory.update(product_id, **changes)
        self.console.say()
        self.console.say(MSG_UPDATED)
        self.console.say()

    def delete_product(self) -> None:
        self.console.say(section_title("DELETE PRODUCT DETAILS"))
        if not self._require_stock_records("deleting"):
            return

        product_id = self.console.ask_int("Enter Product ID to delete: ")
        found = self.inventory.search(product_id)
        if not found.ok:
            self.console.say(MSG_NOT_FOUND)
            return
        self._print_table([found.chip])

        confirmed = self.console.ask_yes_no("Are you sure you want to delete this product? (y/n): ")
        res = self.inventory.delete(product_id, confirmed=confirmed)
        if res.outcome is Outcome.CANCELLED:
            self.console.say(MSG_DELETE_CANCELLED)
            return
        self.console.say()
        self.console.say(MSG_DELETED)
        self.console.say()

    def generate_bill(self) -> None:
        self.console.say(section_title("BILL SLIP"))
        if not self._require_stock_records("billing"):
            return

        product_id = self.console.ask_int("\nEnter Product ID to bill: ")
        res = self.billing.resolve(product_id)
        if res.outcome is Outcome.NOT_FOUND:
            self.console.say(MSG_NOT_FOUND)
            return
        if res.outcome is Outcome.OUT_OF_STOCK:
            self.console.say(MSG_OUT_OF_STOCK)
            return

        while True:
            units = self.console.ask_int("Enter quantity to purchase: ")
            check = self.billing.check_units(res.chip, units)
            if check.ok:
                break
            self.console.say(check.message)

        # Bill before the stock write so the slip shows even if the save fails.
        bill = self.billing.quote(res.chip, units)
        self.print_bill(bill)
        outcome, _ = self.billing.checkout(product_id, units)
        if outcome.ok:
            self.console.say("Inventory updated.")
        if self.receipts is not None:
            try:
                path = self.receipts.generate_receipt(bill)
            except OSError as e:
                logger.error("Receipt not written: %s", e)
                self.console.say(f"Could not write receipt: {e}")
                return
            self.console.say(f"Receipt saved to {path}")

    def print_bill(self, bill: Bill) -> None:
        say = self.console.say
        border = "--" * 30
        say()
        say(f"{border} BILL DETAILS {border}")
        say()
        say(Theme.SLIP_RULE)
        say(f"PRODUCT ID   : {bill.product_id}{' ' * 18}PRODUCT NAME : {bill.product_name}")
        say(f"SELLER NAME  : {bill.seller_name}")
        say(f"BRAND NAME   : {bill.brand_name}")
        say(Theme.SLIP_RULE)
        say(f"UNITS        : {bill.units}")
        say(f"UNIT PRICE   : {money(bill.unit_price)}")
        say(f"SUBTOTAL     : {money(bill.subtotal)}")
        say(f"GST @ {percent(bill.tax_rate)}    : {money(bill.tax)}")
        say(f"MRP (incl. GST): {money(bill.gross_total)}")
        say(f"DISCOUNT @{percent(bill.discount_rate)} : -{money(bill.discount)}")
        say(Theme.SLIP_SPLIT)
        say(f"NET AMOUNT   : {money(bill.net)}")
        say(f"YOU SAVED    : {money(bill.savings)}")
        say()
        say(Theme.SLIP_RULE)
        say(" " * 25 + "THANK YOU FOR YOUR VISIT!")
        say(Theme.SLIP_RULE)
        say()

    def contact_info(self) -> None:
        self.console.say(section_title("CONTACT US"))
        self.console.say(Theme.CONTACT_RULE)
        width = max(len(label) for label, _ in CONTACT_INFO)
        for label, value in CONTACT_INFO:
            self.console.say(f"{' ' * 15}{label:<{width}} : {value}")
        self.console.say(Theme.CONTACT_RULE)
        self.console.say()
