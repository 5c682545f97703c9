from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Optional

from chipstock.db.store import RecordStore
from chipstock.models.product import Chip
from chipstock.models.result import OpResult, Outcome

logger = logging.getLogger(__name__)

# Fields an edit may touch; product_id is fixed for the record's lifetime.
EDITABLE_FIELDS = tuple(f.name for f in fields(Chip) if f.name != "product_id")


class InventoryService:
    """
    Add / search / edit / delete against the record store.
    "Not found" and "cancelled" come back as outcomes; only StoreIOError
    from a failed save is raised.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def list_all(self) -> list[Chip]:
        return list(self.store.records)

    def is_empty(self) -> bool:
        return len(self.store) == 0

    def is_id_available(self, product_id: int) -> bool:
        return not self.store.exists(product_id)

    def add(self, chip: Chip) -> OpResult:
        if not self.is_id_available(chip.product_id):
            return OpResult(Outcome.DUPLICATE, self.store.find(chip.product_id))
        self.store.add(chip)
        logger.info("Added product %d", chip.product_id)
        return OpResult(Outcome.OK, chip)

    def search(self, product_id: int) -> OpResult:
        chip = self.store.find(product_id)
        if chip is None:
            return OpResult(Outcome.NOT_FOUND)
        return OpResult(Outcome.OK, chip)

    def update(self, product_id: int, confirmed: bool = True, **changes: Optional[Any]) -> OpResult:
        """
        Apply `changes` to the record. A value of None keeps the current one.
        Unknown field names (including product_id) raise TypeError.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise TypeError(f"Cannot edit field(s): {', '.join(sorted(unknown))}")

        chip = self.store.find(product_id)
        if chip is None:
            return OpResult(Outcome.NOT_FOUND)
        if not confirmed:
            return OpResult(Outcome.CANCELLED, chip)

        for name, value in changes.items():
            if value is not None:
                setattr(chip, name, value)
        self.store.save()
        logger.info("Updated product %d", product_id)
        return OpResult(Outcome.OK, chip)

    def delete(self, product_id: int, confirmed: bool = True) -> OpResult:
        chip = self.store.find(product_id)
        if chip is None:
            return OpResult(Outcome.NOT_FOUND)
        if not confirmed:
            return OpResult(Outcome.CANCELLED, chip)

        self.store.remove(chip)
        logger.info("Deleted product %d", product_id)
        return OpResult(Outcome.OK, replace(chip))
