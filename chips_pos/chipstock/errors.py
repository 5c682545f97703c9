from __future__ import annotations


class ChipStockError(Exception):
    """Base class for every error raised by the inventory tool."""


class FormatError(ChipStockError):
    """A stored line cannot be decoded into a product record."""


class StoreIOError(ChipStockError, OSError):
    """The backing file cannot be read, created or rewritten."""


class NotFoundError(ChipStockError, LookupError):
    def __init__(self, product_id: int):
        super().__init__(f"No product with ID {product_id}")
        self.product_id = product_id


class ValidationError(ChipStockError, ValueError):
    """Operator input is not acceptable for the requested field."""


class InputClosed(ChipStockError):
    """The operator input stream ended."""
