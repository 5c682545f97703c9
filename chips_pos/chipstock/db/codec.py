"""
Line codec for the chips flat file.

One product per line, fields in this order:

    product_id,product_name,quantity,seller_name,price,brand_name,deadstock

There is no header, quoting or escaping. A text field holding a comma or a line
break shifts every column after it, so such values must be refused before they
reach `encode` (the console prompts do this).
"""

from __future__ import annotations

from chipstock.constants import MIN_FIELDS
from chipstock.errors import FormatError
from chipstock.models.product import Chip
from chipstock.utils import parse_int

SEPARATOR = ","
ENCODING = "utf-8"


def split_line(line: str) -> list[str]:
    """Split a stored line into raw fields; empty trailing fields are kept."""
    return line.rstrip("\r\n").split(SEPARATOR)


def _required_int(fields: list[str], index: int, label: str) -> int:
    value = parse_int(fields[index])
    if value is None:
        raise FormatError(f"Invalid {label} value: {fields[index]!r}")
    return value


def decode(line: str) -> Chip:
    fields = split_line(line)
    if len(fields) < MIN_FIELDS:
        raise FormatError(
            f"Insufficient columns to parse chip (expected at least {MIN_FIELDS}, got {len(fields)})"
        )

    product_id = _required_int(fields, 0, "Product_ID")
    quantity = _required_int(fields, 2, "Quantity")
    price = _required_int(fields, 4, "Price")

    # Deadstock is optional; anything unreadable counts as none.
    deadstock = parse_int(fields[6]) if len(fields) > 6 else None

    return Chip(
        product_id=product_id,
        product_name=fields[1],
        quantity=quantity,
        seller_name=fields[3],
        price=price,
        brand_name=fields[5],
        deadstock=deadstock if deadstock is not None else 0,
    )


def decode_bytes(raw: bytes, encoding: str = ENCODING) -> Chip:
    """Decode one raw line from the file; undecodable bytes are a FormatError."""
    try:
        line = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise FormatError(f"Line is not valid {encoding}: {exc.reason} at byte {exc.start}") from exc
    return decode(line)


def encode(chip: Chip) -> str:
    return SEPARATOR.join(
        str(v)
        for v in (
            chip.product_id,
            chip.product_name,
            chip.quantity,
            chip.seller_name,
            chip.price,
            chip.brand_name,
            chip.deadstock,
        )
    )
