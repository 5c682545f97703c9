from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from chipstock.models.product import Chip


class Outcome(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    DUPLICATE = "duplicate"
    OUT_OF_STOCK = "out_of_stock"
    INVALID_QUANTITY = "invalid_quantity"


@dataclass
class OpResult:
    """
    What an inventory or billing operation did.
    `chip` is the record the operation resolved (None when nothing matched).
    """
    outcome: Outcome
    chip: Optional[Chip] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK
