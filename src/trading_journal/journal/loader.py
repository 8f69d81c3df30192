"""Storage boundary: read trade files into validated records.

Accepts the JSON the journal API returns (a list of trade objects, or an
object with a ``"trades"`` list and optionally a ``"goals"`` list) and
the CSV produced by :class:`~.export.TradeExporter`.  Every row is
validated here; analytics never sees an unvalidated trade.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..core.errors import DataError, UnsupportedFormatError
from .export import parse_csv
from .goals import MonthlyGoal
from .record import TradeRecord

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise DataError(f"Trade file not found: {path}") from exc


def _read_json(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise DataError(f"Malformed JSON in {path}: {exc}") from exc


def _rows(path: Path) -> list[dict[str, Any]]:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return parse_csv(_read_text(path))
    if suffix != ".json":
        raise UnsupportedFormatError(f"Unsupported trade file type: '{suffix or path.name}'")

    payload = _read_json(path)
    if isinstance(payload, dict):
        if "trades" not in payload:
            raise DataError(f"Expected a 'trades' list in {path}")
        payload = payload["trades"]
    if not isinstance(payload, list):
        raise DataError(f"Expected a list of trades in {path}")
    return payload


def parse_trades(rows: list[Any]) -> list[TradeRecord]:
    """Validate raw rows, failing on the first bad one."""
    trades = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            raise DataError(f"Trade #{i} is not an object")
        trades.append(TradeRecord.from_mapping(row, index=i))
    return trades


def load_trades(path: str | Path) -> list[TradeRecord]:
    """Load and validate every trade in *path* (.json or .csv)."""
    path = Path(path)
    trades = parse_trades(_rows(path))
    logger.info("Loaded %d trades from %s", len(trades), path)
    return trades


def load_goals(path: str | Path) -> list[MonthlyGoal]:
    """Load monthly goals from the ``"goals"`` list of a JSON file."""
    path = Path(path)
    if path.suffix.lower() != ".json":
        raise UnsupportedFormatError("Goals can only be read from JSON files")
    payload = _read_json(path)
    raw = payload.get("goals", []) if isinstance(payload, dict) else payload
    if not isinstance(raw, list):
        raise DataError(f"Expected a list of goals in {path}")
    try:
        return [MonthlyGoal.model_validate(g) for g in raw]
    except ValidationError as exc:
        raise DataError(f"Invalid goal in {path}: {exc}") from exc
