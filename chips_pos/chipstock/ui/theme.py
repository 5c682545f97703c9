# chipstock/ui/theme.py
from __future__ import annotations

from chipstock.constants import FIELD_LABELS, FIELD_NAMES


class Theme:
    # ===== CONSOLE LOOK (SYSTEM-WIDE) =====
    TABLE_WIDTH = 110
    TITLE_REPEAT = 24
    MENU_RULE = "=" * 58
    SLIP_RULE = "*" * 70
    SLIP_SPLIT = "-=" * 36
    CONTACT_RULE = "*" * 60

    # Column widths, in FIELD_NAMES order
    COLUMN_WIDTHS: dict[str, int] = {
        "product_id":   12,
        "product_name": 24,
        "quantity":     10,
        "seller_name":  26,
        "price":        10,
        "brand_name":   18,
        "deadstock":    10,
    }


def table_rule() -> str:
    return "--" * (Theme.TABLE_WIDTH // 2)


def section_title(title: str) -> str:
    border = "+-" * Theme.TITLE_REPEAT
    return f"\n{border} {title} {border}\n"


def table_header() -> str:
    cols = "".join(f"{FIELD_LABELS[n]:<{Theme.COLUMN_WIDTHS[n]}}" for n in FIELD_NAMES)
    return "\n".join([table_rule(), cols, table_rule()])


def table_row(chip) -> str:
    return "".join(f"{str(getattr(chip, n)):<{Theme.COLUMN_WIDTHS[n]}}" for n in FIELD_NAMES)
