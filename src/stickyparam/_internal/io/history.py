"""Run history I/O helpers (internal)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List

from stickyparam.kernel.run_record import RunRecord


class HistoryLoadError(ValueError):
    """Raised when a history document cannot be read."""


def order_newest_first(records: Iterable[RunRecord]) -> List[RunRecord]:
    """Sort run records by run sequence number, newest first."""
    return sorted(records, key=lambda record: record.run_sequence_number, reverse=True)


def parse_history(data: Any) -> List[RunRecord]:
    """Parse a history document into run records, newest first.
    
    The document is either a list of run records or an object holding them
    under "runs". Items may be dicts or RunRecord instances.
    """
    if isinstance(data, dict):
        if "runs" not in data:
            raise HistoryLoadError("History object missing 'runs' list")
        data = data["runs"]
    if not isinstance(data, (list, tuple)):
        raise HistoryLoadError(f"History must be a list of run records, got {type(data).__name__}")

    records = [
        item if isinstance(item, RunRecord) else RunRecord.model_validate(item)
        for item in data
    ]
    return order_newest_first(records)


def load_history_from_path(path: Path) -> List[RunRecord]:
    """Load run history from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"History file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise HistoryLoadError(f"History file {path} is not valid JSON: {e}") from e
    return parse_history(data)
