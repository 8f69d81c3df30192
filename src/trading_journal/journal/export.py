"""Trade export — CSV/JSON output for spreadsheets and archival.

The CSV layout is the one the journal has always offered for download:
one row per trade, every value quoted with embedded quotes doubled,
confluence lists joined with ``"; "``, and a UTF-8 byte-order mark so
spreadsheet applications pick the right encoding.

Usage::

    exporter = TradeExporter()
    csv_str = exporter.to_csv(trades)
    exporter.write(trades, "trades_export.csv")
    rows = parse_csv(csv_str)
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..core.errors import UnsupportedFormatError
from .outcome import DEFAULT_NOTIONAL_PER_UNIT, currency_pnl
from .record import TradeRecord

logger = logging.getLogger(__name__)

BOM = "\ufeff"
TAG_SEPARATOR = "; "

CSV_COLUMNS = [
    "date",
    "time",
    "pair",
    "direction",
    "target",
    "stopLoss",
    "outcome",
    "pnl",
    "emotion",
    "confluencesPro",
    "confluencesContro",
    "notes",
]


class TradeExporter:
    """Export trades to CSV/JSON.

    Parameters
    ----------
    notional_per_unit : float
        Currency value of one percent-unit of return, used for ``pnl``.
    decimal_places : int
        Precision for target and stop values.  Default 5.
    """

    def __init__(
        self,
        *,
        notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
        decimal_places: int = 5,
    ) -> None:
        self._notional = notional_per_unit
        self._dp = decimal_places

    # ------------------------------------------------------------------ #
    # CSV Export                                                           #
    # ------------------------------------------------------------------ #

    def to_csv(self, trades: Iterable[TradeRecord], *, bom: bool = True) -> str:
        """Export trades as a CSV string with a header row."""
        buf = io.StringIO()
        writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        count = 0
        for trade in trades:
            row = self._trade_to_row(trade)
            writer.writerow([row[c] for c in CSV_COLUMNS])
            count += 1
        logger.debug("Exported %d trades to CSV", count)
        return (BOM if bom else "") + buf.getvalue()

    # ------------------------------------------------------------------ #
    # JSON Export                                                          #
    # ------------------------------------------------------------------ #

    def to_json(self, trades: Iterable[TradeRecord], *, indent: int = 2) -> str:
        """Export trades as a JSON list, one object per trade."""
        rows = []
        for trade in trades:
            data = trade.model_dump(mode="json")
            data["pnl"] = round(currency_pnl(trade, self._notional), 2)
            rows.append(data)
        return json.dumps(rows, indent=indent, ensure_ascii=False)

    def write(self, trades: Iterable[TradeRecord], path: str | Path) -> Path:
        """Write trades to *path*; the extension picks the format."""
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            content = self.to_csv(trades)
        elif suffix == ".json":
            content = self.to_json(trades)
        else:
            raise UnsupportedFormatError(f"Cannot export to '{suffix or path.name}'")
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote trade export to %s", path)
        return path

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _trade_to_row(self, trade: TradeRecord) -> dict[str, Any]:
        """Flatten a TradeRecord into CSV cell strings."""
        dp = self._dp
        return {
            "date": trade.date.isoformat(),
            "time": trade.time.strftime("%H:%M") if trade.time else "",
            "pair": trade.pair,
            "direction": trade.direction.value,
            "target": f"{trade.target:.{dp}f}",
            "stopLoss": f"{trade.stop_loss:.{dp}f}",
            "outcome": trade.outcome.value,
            "pnl": f"{currency_pnl(trade, self._notional):.2f}",
            "emotion": trade.emotion,
            "confluencesPro": TAG_SEPARATOR.join(trade.confluences_pro),
            "confluencesContro": TAG_SEPARATOR.join(trade.confluences_contro),
            "notes": trade.notes,
        }


def parse_csv(text: str) -> list[dict[str, str]]:
    """Read an export back into one dict of cell strings per row."""
    if text.startswith(BOM):
        text = text[len(BOM):]
    reader = csv.DictReader(io.StringIO(text, newline=""))
    return [dict(row) for row in reader]
