from __future__ import annotations

from pathlib import Path

# ---------------- App Info ----------------
APP_NAME = "Chip Stock POS"
APP_VERSION = "1.0"


# ---------------- Paths ----------------
# Relative paths resolve against the working directory the tool is started from.
DATA_FILE = Path("chips.csv")

EXPORTS_DIR = Path("exports")
RECEIPTS_DIR = Path("receipts")


# ---------------- Billing ----------------
GST_RATE = 0.18
CURRENCY = "Rs."

# Discount tiers, checked in ascending order, first match wins:
#   1. basis value <= low threshold        -> DISCOUNT_LOW_RATE
#   2. unit price  <  DISCOUNT_MID_LIMIT   -> DISCOUNT_MID_RATE
#   3. otherwise                           -> DISCOUNT_HIGH_RATE
# "unit" compares the GST-inclusive unit price, "total" the GST-inclusive total.
DISCOUNT_BASIS_UNIT = "unit"
DISCOUNT_BASIS_TOTAL = "total"
DISCOUNT_BASES = [DISCOUNT_BASIS_UNIT, DISCOUNT_BASIS_TOTAL]

DISCOUNT_BASIS = DISCOUNT_BASIS_UNIT
DISCOUNT_LOW_THRESHOLDS: dict[str, float] = {
    DISCOUNT_BASIS_UNIT: 200.0,
    DISCOUNT_BASIS_TOTAL: 1000.0,
}
DISCOUNT_LOW_RATE = 0.05
DISCOUNT_MID_LIMIT = 3000.0
DISCOUNT_MID_RATE = 0.08
DISCOUNT_HIGH_RATE = 0.12


# ---------------- Reports ----------------
LOW_STOCK_THRESHOLD = 5


# ---------------- Contact ----------------
CONTACT_INFO = [
    ("Support Desk", "Silicon Supply Co."),
    ("Email", "support@siliconsupply.com"),
    ("Phone", "+1-800-555-CHIP"),
    ("Hours", "Mon-Sat 9:00-18:00"),
]


# ---------------- Logging ----------------
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_LEVEL = "WARNING"
