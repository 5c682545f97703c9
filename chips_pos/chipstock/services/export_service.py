from __future__ import annotations
import csv
from datetime import datetime
from pathlib import Path

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from chipstock.config import APP_NAME, EXPORTS_DIR
from chipstock.constants import FIELD_LABELS, FIELD_NAMES
from chipstock.db.store import RecordStore

class ExportService:
    def __init__(self, store: RecordStore, exports_dir: Path | None = None):
        self.store = store
        self.exports_dir = Path(exports_dir) if exports_dir else EXPORTS_DIR

    def _rows(self) -> list[list]:
        return [[getattr(c, name) for name in FIELD_NAMES] for c in self.store.records]

    def export_inventory_csv(self, out_path: Path | None = None) -> Path:
        out_path = Path(out_path) if out_path else (self.exports_dir / "inventory.csv")
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(FIELD_NAMES)
            w.writerows(self._rows())
        return out_path

    def export_inventory_xlsx(self, out_path: Path | None = None) -> Path:
        out_path = Path(out_path) if out_path else (self.exports_dir / "inventory.xlsx")
        out_path.parent.mkdir(parents=True, exist_ok=True)

        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Inventory"

        title_fill  = PatternFill("solid", fgColor="6B4B3A")
        title_font  = Font(bold=True, size=14, color="FFFFFF")
        header_fill = PatternFill("solid", fgColor="EADFD2")
        header_font = Font(bold=True, size=10, color="1F1F1F")
        total_fill  = PatternFill("solid", fgColor="F0FAF4")
        thin_border = Border(bottom=Side(style="thin", color="D5C7B8"))
        center      = Alignment(horizontal="center", vertical="center")

        last_col = get_column_letter(len(FIELD_NAMES))

        # ── Title block ───────────────────────────────────────────────────────
        ws.merge_cells(f"A1:{last_col}1")
        ws["A1"] = f"{APP_NAME} - Inventory"
        ws["A1"].font = title_font
        ws["A1"].fill = title_fill
        ws["A1"].alignment = center
        ws.row_dimensions[1].height = 28

        ws.merge_cells(f"A2:{last_col}2")
        ws["A2"] = f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
        ws["A2"].alignment = center

        # ── Column headers ────────────────────────────────────────────────────
        header_row = 4
        for col_idx, name in enumerate(FIELD_NAMES, start=1):
            cell = ws.cell(row=header_row, column=col_idx, value=FIELD_LABELS[name])
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = thin_border

        # ── Data rows ─────────────────────────────────────────────────────────
        rows = self._rows()
        for row_idx, row in enumerate(rows, start=header_row + 1):
            for col_idx, value in enumerate(row, start=1):
                ws.cell(row=row_idx, column=col_idx, value=value)

        # ── Totals ────────────────────────────────────────────────────────────
        total_row = header_row + len(rows) + 1
        qty_col = FIELD_NAMES.index("quantity") + 1
        dead_col = FIELD_NAMES.index("deadstock") + 1
        ws.cell(row=total_row, column=1, value="TOTAL").font = Font(bold=True)
        ws.cell(row=total_row, column=qty_col, value=sum(c.quantity for c in self.store.records))
        ws.cell(row=total_row, column=dead_col, value=sum(c.deadstock for c in self.store.records))
        for col_idx in range(1, len(FIELD_NAMES) + 1):
            ws.cell(row=total_row, column=col_idx).fill = total_fill

        for col_idx, name in enumerate(FIELD_NAMES, start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = max(12, len(FIELD_LABELS[name]) + 4)

        wb.save(out_path)
        return out_path
