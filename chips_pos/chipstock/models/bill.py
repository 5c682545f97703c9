from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Bill:
    product_id: int
    product_name: str
    seller_name: str
    brand_name: str
    units: int
    unit_price: float
    subtotal: float
    tax_rate: float
    tax: float
    gross_unit: float
    gross_total: float
    discount_rate: float
    discount: float
    net: float

    @property
    def savings(self) -> float:
        return self.discount
