from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas as rl_canvas

from chipstock.config import APP_NAME, RECEIPTS_DIR
from chipstock.models.bill import Bill
from chipstock.utils import money, percent

FONT_REG  = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


class ReceiptService:
    """Generates 80mm-style thermal bill slips as PDF files using reportlab."""

    def __init__(self, out_dir: Path | None = None):
        self.out_dir = Path(out_dir) if out_dir else RECEIPTS_DIR

    def generate_receipt(self, bill: Bill) -> Path:
        """Build a PDF bill slip and return its file path."""
        self.out_dir.mkdir(parents=True, exist_ok=True)

        # ── File path ─────────────────────────────────────────────────────────
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        file_path = self.out_dir / f"bill_{bill.product_id}_{timestamp}.pdf"
        n = 1
        while file_path.exists():
            file_path = self.out_dir / f"bill_{bill.product_id}_{timestamp}_{n}.pdf"
            n += 1

        # ── Page geometry (80 mm paper width) ─────────────────────────────────
        PAGE_W = 80 * mm
        PAGE_H = 150 * mm
        MARGIN = 6 * mm
        NL = 5.2 * mm

        c = rl_canvas.Canvas(str(file_path), pagesize=(PAGE_W, PAGE_H))
        y = PAGE_H - 10 * mm

        def move(mm_val: float = 1.5):
            nonlocal y
            y -= mm_val * mm

        def draw_text(text: str, font=FONT_REG, size: int = 8):
            nonlocal y
            c.setFont(font, size)
            c.drawCentredString(PAGE_W / 2, y, str(text))
            y -= NL

        def draw_hr(thickness: float = 0.4, gap_after: float = 6.0):
            nonlocal y
            c.setLineWidth(thickness)
            c.line(MARGIN, y, PAGE_W - MARGIN, y)
            y -= gap_after * mm

        def draw_row(left: str, right: Any, size: int = 8, bold: bool = False):
            nonlocal y
            c.setFont(FONT_BOLD if bold else FONT_REG, size)
            avail = int((PAGE_W - 2 * MARGIN) * 0.55 / (size * 0.52))
            left = left[:avail - 1] + "…" if len(left) > avail else left
            c.drawString(MARGIN, y, left)
            c.drawRightString(PAGE_W - MARGIN, y, str(right))
            y -= NL

        # ── Header ────────────────────────────────────────────────────────────
        draw_text(APP_NAME.upper(), font=FONT_BOLD, size=11)
        draw_text("Bill Slip")
        move(3)
        draw_hr(1.0)

        # ── Product ───────────────────────────────────────────────────────────
        draw_row("Product ID:", bill.product_id)
        draw_row("Product:", bill.product_name)
        draw_row("Seller:", bill.seller_name)
        draw_row("Brand:", bill.brand_name)
        move(3)
        draw_hr()

        # ── Amounts ───────────────────────────────────────────────────────────
        draw_row("Units:", bill.units)
        draw_row("Unit price:", money(bill.unit_price))
        draw_row("Subtotal:", money(bill.subtotal))
        draw_row(f"GST @ {percent(bill.tax_rate)}:", money(bill.tax))
        draw_row("MRP (incl. GST):", money(bill.gross_total))
        draw_row(f"Discount @ {percent(bill.discount_rate)}:", f"-{money(bill.discount)}")
        move(1)
        draw_row("NET AMOUNT:", money(bill.net), size=10, bold=True)
        draw_row("You saved:", money(bill.savings))
        move(3)
        draw_hr(1.0)

        # ── Footer ────────────────────────────────────────────────────────────
        draw_text(f"Printed: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}", size=7)
        draw_text("Thank you for your visit!", font=FONT_BOLD)

        c.save()
        return file_path
