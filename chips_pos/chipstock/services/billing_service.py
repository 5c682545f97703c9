from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from chipstock.config import (
    DISCOUNT_BASES,
    DISCOUNT_BASIS,
    DISCOUNT_BASIS_UNIT,
    DISCOUNT_HIGH_RATE,
    DISCOUNT_LOW_RATE,
    DISCOUNT_LOW_THRESHOLDS,
    DISCOUNT_MID_LIMIT,
    DISCOUNT_MID_RATE,
    GST_RATE,
)
from chipstock.constants import MSG_QTY_NOT_POSITIVE, MSG_QTY_TOO_LARGE
from chipstock.db.store import RecordStore
from chipstock.models.bill import Bill
from chipstock.models.product import Chip
from chipstock.models.result import OpResult, Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscountPolicy:
    """
    Three discount tiers, checked in ascending order (first match wins):
      - basis value <= low_threshold  -> low_rate
      - unit price  <  mid_limit      -> mid_rate
      - otherwise                     -> high_rate

    basis="unit" compares the GST-inclusive unit price,
    basis="total" compares the GST-inclusive total for the whole purchase.
    """
    basis: str = DISCOUNT_BASIS
    low_threshold: float = DISCOUNT_LOW_THRESHOLDS[DISCOUNT_BASIS]
    low_rate: float = DISCOUNT_LOW_RATE
    mid_limit: float = DISCOUNT_MID_LIMIT
    mid_rate: float = DISCOUNT_MID_RATE
    high_rate: float = DISCOUNT_HIGH_RATE

    def __post_init__(self):
        if self.basis not in DISCOUNT_BASES:
            raise ValueError(f"Unknown discount basis {self.basis!r} (expected one of {DISCOUNT_BASES})")
        if not (self.low_rate <= self.mid_rate <= self.high_rate):
            raise ValueError("Discount rates must not decrease from tier to tier.")

    @classmethod
    def for_basis(cls, basis: str) -> "DiscountPolicy":
        """Policy with the configured threshold for `basis`."""
        if basis not in DISCOUNT_LOW_THRESHOLDS:
            raise ValueError(f"Unknown discount basis {basis!r} (expected one of {DISCOUNT_BASES})")
        return cls(basis=basis, low_threshold=DISCOUNT_LOW_THRESHOLDS[basis])

    def rate_for(self, unit_price: float, gross_unit: float, gross_total: float) -> float:
        basis_value = gross_unit if self.basis == DISCOUNT_BASIS_UNIT else gross_total
        if basis_value <= self.low_threshold:
            return self.low_rate
        if unit_price < self.mid_limit:
            return self.mid_rate
        return self.high_rate


def compute_bill(chip: Chip, units: int, tax_rate: float = GST_RATE,
                 policy: Optional[DiscountPolicy] = None) -> Bill:
    """Price `units` of `chip`. No rounding; round only for display."""
    policy = policy or DiscountPolicy()

    unit_price = float(chip.price)
    subtotal = unit_price * units
    tax = subtotal * tax_rate
    gross_unit = unit_price * (1.0 + tax_rate)
    gross_total = gross_unit * units

    rate = policy.rate_for(unit_price, gross_unit, gross_total)
    discount = gross_total * rate

    return Bill(
        product_id=chip.product_id,
        product_name=chip.product_name,
        seller_name=chip.seller_name,
        brand_name=chip.brand_name,
        units=units,
        unit_price=unit_price,
        subtotal=subtotal,
        tax_rate=tax_rate,
        tax=tax,
        gross_unit=gross_unit,
        gross_total=gross_total,
        discount_rate=rate,
        discount=discount,
        net=gross_total - discount,
    )


class BillingService:
    def __init__(self, store: RecordStore, tax_rate: float = GST_RATE,
                 policy: Optional[DiscountPolicy] = None):
        self.store = store
        self.tax_rate = tax_rate
        self.policy = policy or DiscountPolicy()

    def resolve(self, product_id: int) -> OpResult:
        """Find a product that can be billed."""
        chip = self.store.find(product_id)
        if chip is None:
            return OpResult(Outcome.NOT_FOUND)
        if chip.quantity <= 0:
            return OpResult(Outcome.OUT_OF_STOCK, chip)
        return OpResult(Outcome.OK, chip)

    @staticmethod
    def check_units(chip: Chip, units: int) -> OpResult:
        if units <= 0:
            return OpResult(Outcome.INVALID_QUANTITY, chip, MSG_QTY_NOT_POSITIVE)
        if units > chip.quantity:
            return OpResult(Outcome.INVALID_QUANTITY, chip,
                            MSG_QTY_TOO_LARGE.format(available=chip.quantity))
        return OpResult(Outcome.OK, chip)

    def quote(self, chip: Chip, units: int) -> Bill:
        return compute_bill(chip, units, self.tax_rate, self.policy)

    def checkout(self, product_id: int, units: int) -> tuple[OpResult, Optional[Bill]]:
        """
        Bill `units` of a product and take them out of stock.
        Returns the outcome and, on success, the bill. Nothing changes unless OK.
        """
        res = self.resolve(product_id)
        if not res.ok:
            return res, None
        chip = res.chip

        check = self.check_units(chip, units)
        if not check.ok:
            return check, None

        bill = self.quote(chip, units)
        chip.quantity -= units
        self.store.save()
        logger.info("Billed %d unit(s) of product %d, net %.2f", units, product_id, bill.net)
        return OpResult(Outcome.OK, chip), bill
