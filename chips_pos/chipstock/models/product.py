from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Chip:
    product_id: int
    product_name: str
    quantity: int
    seller_name: str
    price: int
    brand_name: str
    deadstock: int = 0
