from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from matplotlib.figure import Figure

from chipstock.config import EXPORTS_DIR, LOW_STOCK_THRESHOLD
from chipstock.db.store import RecordStore
from chipstock.models.product import Chip


@dataclass
class StockSummary:
    record_count: int = 0
    total_units: int = 0
    total_deadstock: int = 0
    stock_value: float = 0.0
    low_stock: list[Chip] = field(default_factory=list)
    out_of_stock: list[Chip] = field(default_factory=list)


class ReportService:
    def __init__(self, store: RecordStore, low_stock_threshold: int = LOW_STOCK_THRESHOLD,
                 exports_dir: Path | None = None):
        self.store = store
        self.low_stock_threshold = low_stock_threshold
        self.exports_dir = Path(exports_dir) if exports_dir else EXPORTS_DIR

    def summary(self) -> StockSummary:
        chips = self.store.records
        return StockSummary(
            record_count=len(chips),
            total_units=sum(c.quantity for c in chips),
            total_deadstock=sum(c.deadstock for c in chips),
            stock_value=float(sum(c.price * c.quantity for c in chips)),
            low_stock=[c for c in chips if 0 < c.quantity <= self.low_stock_threshold],
            out_of_stock=[c for c in chips if c.quantity <= 0],
        )

    def stock_chart(self, out_path: Path | None = None) -> Path:
        """Bar chart of on-hand quantity and deadstock per product, saved as PNG."""
        out_path = Path(out_path) if out_path else (self.exports_dir / "stock_levels.png")
        out_path.parent.mkdir(parents=True, exist_ok=True)

        chips = self.store.records
        labels = [f"{c.product_id} {c.product_name}".strip() for c in chips]
        x = list(range(len(chips)))
        width = 0.4

        fig = Figure(figsize=(10, 5), dpi=80)
        ax = fig.add_subplot(111)
        if chips:
            ax.bar([i - width / 2 for i in x], [c.quantity for c in chips], width,
                   label="Quantity", color="#6B4B3A", edgecolor="none")
            ax.bar([i + width / 2 for i in x], [c.deadstock for c in chips], width,
                   label="Deadstock", color="#C04B45", edgecolor="none")
            ax.axhline(self.low_stock_threshold, color="#D49B28", linestyle="--",
                       linewidth=1, label="Low stock")
            ax.set_xticks(x)
            ax.set_xticklabels(labels, rotation=45 if len(chips) > 6 else 0, ha="right")
            ax.legend()
        else:
            ax.text(0.5, 0.5, "No products", ha="center", va="center", transform=ax.transAxes)
        ax.set_xlabel("Product", fontsize=10)
        ax.set_ylabel("Units", fontsize=10)
        ax.grid(axis="y", alpha=0.2)
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)

        fig.savefig(out_path, bbox_inches="tight")
        return out_path
