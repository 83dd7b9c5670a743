"""
history.py — Sorting Run History
=================================
Append-only log of finished sorts: one `{array, algorithm}` entry per run.

    store = HistoryStore("sorting_history.json")   # reads the file once
    store.append(HistoryEntry([1, 2, 3], "bubble"))  # rewrites it in full
    store.entries()

`load_history` / `dump_history` are the pure text boundary; the store is
the only thing that touches the file.
"""

import json
import logging
import os
import threading
from dataclasses import dataclass, field, asdict
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class HistoryEntry:
    array:     List[int] = field(default_factory=list)
    algorithm: str       = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        return cls(array=[int(v) for v in data["array"]], algorithm=str(data["algorithm"]))


def load_history(text: str) -> List[HistoryEntry]:
    """Parse stored history.  Blank or malformed text yields an empty list."""
    if not text or not text.strip():
        return []
    try:
        raw = json.loads(text)
        return [HistoryEntry.from_dict(item) for item in raw]
    except (ValueError, TypeError, KeyError) as e:
        logger.warning("Ignoring unreadable sorting history: %s", e)
        return []


def dump_history(entries: List[HistoryEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries])


class HistoryStore:
    """
    Attributes:
        path : JSON file backing the log, or None for an in-memory store.
    """

    def __init__(self, path: Optional[str] = None):
        self.path: Optional[str] = path
        self._lock = threading.Lock()
        self._entries: List[HistoryEntry] = self._read()

    def entries(self) -> List[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def append(self, entry: HistoryEntry) -> None:
        # one store serves every request thread
        with self._lock:
            self._entries.append(entry)
            self._write()
            count = len(self._entries)
        logger.info("History: %s run recorded (%d entries)", entry.algorithm, count)

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _read(self) -> List[HistoryEntry]:
        if not self.path or not os.path.exists(self.path):
            return []
        try:
            with open(self.path, encoding="utf-8") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable sorting history %s: %s", self.path, e)
            return []
        return load_history(text)

    def _write(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(dump_history(self._entries))
