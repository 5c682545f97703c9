from __future__ import annotations

import re
from typing import Any, Optional

from chipstock.config import CURRENCY

# Optional leading whitespace and sign, then digits, nothing after.
_INT_RE = re.compile(r"\s*[+-]?\d+")


def parse_int(text: str) -> Optional[int]:
    """Return the integer in `text`, or None when it is not a plain integer."""
    if text is None or not _INT_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Past the interpreter's integer string length limit.
        return None


# ---------------- Money formatting ----------------
def money(value: Any) -> str:
    try:
        v = float(value)
    except (TypeError, ValueError):
        v = 0.0
    return f"{CURRENCY} {v:,.2f}"


def percent(rate: float) -> str:
    """0.05 -> '5%', 0.125 -> '12.5%'."""
    return f"{rate * 100:g}%"
