"""A JSON array on disk, shared by the file-backed repositories."""

from __future__ import annotations

import json
import threading
from pathlib import Path

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonStore:
    """Loads and persists a list of records.

    ``lock`` is shared by every store on the same file within the
    process. Hold it around any read-modify-write that must not
    interleave with another one.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self.lock = _lock_for(self._file_path)
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        # Write-then-rename so a crash never leaves half a file behind.
        tmp = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        tmp.replace(self._file_path)

    def upsert(self, record: dict, key: str) -> None:
        with self.lock:
            records = self.load()
            for i, raw in enumerate(records):
                if raw[key] == record[key]:
                    records[i] = record
                    break
            else:
                records.append(record)
            self.persist(records)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
