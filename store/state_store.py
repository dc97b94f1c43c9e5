"""File-backed store of minimized windows.

Every mutation reads the whole file and rewrites it. There is no locking:
two invocations racing on the same file can lose one update (last writer
wins). I/O errors are not caught here.
"""

from __future__ import annotations

import logging
from pathlib import Path

from store.record_codec import MinimizedWindowRecord, decode, encode

logger = logging.getLogger("veil.store")


class StateStore:
    """Ordered record list persisted as one text file, oldest first."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def ensure_exists(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(encode([]), encoding="utf-8")

    def load(self) -> list[MinimizedWindowRecord]:
        self.ensure_exists()
        return decode(self.path.read_text(encoding="utf-8", errors="replace"))

    def persist(self, records: list[MinimizedWindowRecord]) -> None:
        self.path.write_text(encode(records), encoding="utf-8")

    def append(self, record: MinimizedWindowRecord) -> None:
        """Add a record at the end, replacing any older entry with its key."""
        records = [r for r in self.load() if r.key != record.key]
        records.append(record)
        self.persist(records)
        logger.debug("stored %s (%d minimized)", record.key, len(records))

    def remove_by_key(self, key: str) -> bool:
        """Drop the record with this key; returns False when none matched."""
        records = self.load()
        remaining = [r for r in records if r.key != key]
        self.persist(remaining)
        return len(remaining) != len(records)

    def last(self) -> MinimizedWindowRecord | None:
        records = self.load()
        return records[-1] if records else None
