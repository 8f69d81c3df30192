"""Chronological ordering of trades.

Equity curves, drawdown and streaks all walk trades in the order they
were taken.  ``sorted`` is stable, so trades logged at the same date and
time keep the order they were stored in.
"""

from __future__ import annotations

from typing import Iterable

from .record import TradeRecord


def chronological(trades: Iterable[TradeRecord]) -> list[TradeRecord]:
    """Return a new list of *trades* sorted by (date, time or 00:00)."""
    return sorted(trades, key=lambda t: t.sort_key)
