"""JSONL chronicle recorder: captures every notice for offline analysis."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tick_hearth import NOTICE_KINDS, HearthEngine, Notice


class ChronicleRecorder:
    """Subscribes to an engine's notices and accumulates JSONL records."""

    def __init__(self, engine: HearthEngine) -> None:
        self._records: list[dict[str, Any]] = []
        for kind in NOTICE_KINDS:
            engine.subscribe(kind, self._on_notice)

    def _on_notice(self, kind: str, notice: Notice) -> None:
        record: dict[str, Any] = {
            "tick": notice.tick,
            "type": kind,
            "message": notice.message,
        }
        record.update(notice.data)
        self._records.append(record)

    @property
    def count(self) -> int:
        return len(self._records)

    def write(self, path: str | Path) -> int:
        """Write all records as JSONL. Returns number of lines written."""
        p = Path(path)
        with p.open("w") as f:
            for record in self._records:
                f.write(json.dumps(record, default=str) + "\n")
        return len(self._records)
