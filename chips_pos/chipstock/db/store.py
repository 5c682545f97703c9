from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

from chipstock.config import DATA_FILE
from chipstock.db.codec import ENCODING, decode_bytes, encode
from chipstock.errors import FormatError, NotFoundError, StoreIOError
from chipstock.models.product import Chip

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Owns the in-memory list of chips and its backing flat file.
    Every mutation rewrites the whole file from the current list.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Path(DATA_FILE)
        self._chips: list[Chip] = []

    def __len__(self) -> int:
        return len(self._chips)

    def __iter__(self) -> Iterator[Chip]:
        return iter(list(self._chips))

    @property
    def records(self) -> tuple[Chip, ...]:
        return tuple(self._chips)

    def load(self) -> list[Chip]:
        """
        Replace the in-memory list with the file contents.
        - Creates an empty file (and its folder) when none exists
        - Skips blank lines
        - Skips lines that fail to decode, logging the line number
        """
        self._chips = []

        if not self.path.exists():
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as exc:
                raise StoreIOError(f"Unable to create data file {self.path}: {exc}") from exc
            logger.info("Created empty data file %s", self.path)
            return []

        try:
            with open(self.path, "rb") as f:
                lines = f.read().split(b"\n")
        except OSError as exc:
            raise StoreIOError(f"Unable to read data file {self.path}: {exc}") from exc

        seen: set[int] = set()
        for line_no, raw in enumerate(lines, start=1):
            raw = raw.rstrip(b"\r")
            if not raw:
                continue
            try:
                chip = decode_bytes(raw)
            except FormatError as exc:
                logger.warning("Skipping malformed line %d: %s", line_no, exc)
                continue
            if chip.product_id in seen:
                # Kept as-is; lookups resolve to the first record with this ID.
                logger.warning("Duplicate product ID %d on line %d", chip.product_id, line_no)
            seen.add(chip.product_id)
            self._chips.append(chip)

        logger.debug("Loaded %d record(s) from %s", len(self._chips), self.path)
        return list(self._chips)

    def save(self, records: Optional[list[Chip]] = None) -> None:
        """
        Truncate the backing file and write one line per record, in list order.
        Passing `records` replaces the in-memory list first.
        """
        if records is not None:
            self._chips = list(records)
        try:
            with open(self.path, "w", encoding=ENCODING, newline="") as f:
                for chip in self._chips:
                    f.write(encode(chip) + "\n")
        except OSError as exc:
            raise StoreIOError(f"Failed to open data file for writing: {exc}") from exc
        logger.debug("Saved %d record(s) to %s", len(self._chips), self.path)

    def find(self, product_id: int) -> Optional[Chip]:
        for chip in self._chips:
            if chip.product_id == product_id:
                return chip
        return None

    def get(self, product_id: int) -> Chip:
        chip = self.find(product_id)
        if chip is None:
            raise NotFoundError(product_id)
        return chip

    def exists(self, product_id: int) -> bool:
        return self.find(product_id) is not None

    def add(self, chip: Chip) -> None:
        """Append and persist. Uniqueness is the caller's gate."""
        self._chips.append(chip)
        self.save()

    def remove(self, chip: Chip) -> None:
        """Remove exactly this record (by identity) and persist."""
        for i, candidate in enumerate(self._chips):
            if candidate is chip:
                del self._chips[i]
                break
        else:
            raise NotFoundError(chip.product_id)
        self.save()
