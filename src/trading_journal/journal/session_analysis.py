"""Day-of-week, hour-of-day and calendar performance analysis.

Breaks trading performance down by when trades were taken to reveal
temporal patterns.  Answers questions like "Am I better at 9:00 than
at 15:00?", "Should I avoid Fridays?" or "How did March compare with
February?"

Usage::

    by_day = performance_by_weekday(trades)
    by_day[1].win_rate              # Monday
    months = monthly_breakdown(trades, initial_capital=10_000)
    months[-1].equity               # balance at the end of the last month
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import asdict, dataclass
from datetime import date as Date
from datetime import timedelta
from typing import Any, Iterable

from .buckets import BucketStats, _BucketAccumulator
from .equity import DEFAULT_INITIAL_CAPITAL
from .outcome import DEFAULT_NOTIONAL_PER_UNIT, safe_ratio
from .record import TradeRecord

logger = logging.getLogger(__name__)

# Index 0 is Sunday, matching TradeRecord.weekday
DAY_NAMES = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]
DAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

DEFAULT_FIRST_HOUR = 6
DEFAULT_LAST_HOUR = 22


@dataclass(frozen=True)
class MonthStats:
    """One calendar month of trading.

    ``pnl`` is the month's currency PnL and ``equity`` the balance at
    month end, carried forward from the initial capital.
    """

    key: str
    label: str
    year: int
    month: int
    trades: int
    wins: int
    losses: int
    win_rate: float
    pnl: float
    equity: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ------------------------------------------------------------------ #
# Fixed buckets                                                        #
# ------------------------------------------------------------------ #

def performance_by_weekday(
    trades: Iterable[TradeRecord],
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> list[BucketStats]:
    """Seven buckets, index 0 = Sunday .. 6 = Saturday."""
    days = [_BucketAccumulator() for _ in range(7)]
    for trade in trades:
        days[trade.weekday].record(trade)
    return [
        acc.freeze(DAY_NAMES[i], DAY_LABELS[i], notional_per_unit)
        for i, acc in enumerate(days)
    ]


def performance_by_hour(
    trades: Iterable[TradeRecord],
    first_hour: int = DEFAULT_FIRST_HOUR,
    last_hour: int = DEFAULT_LAST_HOUR,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> list[BucketStats]:
    """One bucket per hour in ``[first_hour, last_hour]``.

    Trades without a time, or outside the range, are left out of this
    breakdown only.
    """
    hours = {h: _BucketAccumulator() for h in range(first_hour, last_hour + 1)}
    skipped = 0
    for trade in trades:
        acc = hours.get(trade.hour) if trade.hour is not None else None
        if acc is None:
            skipped += 1
            continue
        acc.record(trade)
    if skipped:
        logger.debug("Hour breakdown skipped %d trades without a usable time", skipped)
    return [
        acc.freeze(f"{h:02d}", f"{h:02d}:00", notional_per_unit)
        for h, acc in hours.items()
    ]


# ------------------------------------------------------------------ #
# Calendar buckets                                                     #
# ------------------------------------------------------------------ #

def monthly_breakdown(
    trades: Iterable[TradeRecord],
    initial_capital: float = DEFAULT_INITIAL_CAPITAL,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> list[MonthStats]:
    """Per (year, month) stats in calendar order with running equity."""
    months: dict[tuple[int, int], _BucketAccumulator] = defaultdict(_BucketAccumulator)
    for trade in trades:
        months[(trade.date.year, trade.date.month)].record(trade)

    equity = initial_capital
    result: list[MonthStats] = []
    for year, month in sorted(months):
        acc = months[(year, month)]
        pnl = acc.return_pct * notional_per_unit
        equity += pnl
        result.append(MonthStats(
            key=f"{year:04d}-{month:02d}",
            label=f"{MONTH_LABELS[month - 1]} {year % 100:02d}",
            year=year,
            month=month,
            trades=acc.trades,
            wins=acc.wins,
            losses=acc.losses,
            win_rate=safe_ratio(acc.wins, acc.trades),
            pnl=pnl,
            equity=equity,
        ))
    return result


def month_stats(
    trades: Iterable[TradeRecord],
    year: int,
    month: int,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> BucketStats:
    """Stats for a single month; an empty bucket when nothing was traded.

    Raises ValueError when *month* is outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    acc = _BucketAccumulator()
    for trade in trades:
        if trade.date.year == year and trade.date.month == month:
            acc.record(trade)
    return acc.freeze(
        f"{year:04d}-{month:02d}",
        f"{MONTH_LABELS[month - 1]} {year % 100:02d}",
        notional_per_unit,
    )


def daily_summary(
    trades: Iterable[TradeRecord],
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> list[BucketStats]:
    """Per calendar day stats, oldest first (the journal calendar view)."""
    days: dict[Date, _BucketAccumulator] = defaultdict(_BucketAccumulator)
    for trade in trades:
        days[trade.date].record(trade)
    return [
        days[d].freeze(d.isoformat(), d.strftime("%d/%m"), notional_per_unit)
        for d in sorted(days)
    ]


def week_bounds(reference: Date) -> tuple[Date, Date]:
    """Monday and Sunday of the week containing *reference*."""
    monday = reference - timedelta(days=reference.weekday())
    return monday, monday + timedelta(days=6)


def weekly_recap(
    trades: Iterable[TradeRecord],
    reference: Date,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> BucketStats:
    """Stats for the Monday..Sunday week containing *reference*."""
    monday, sunday = week_bounds(reference)
    acc = _BucketAccumulator()
    for trade in trades:
        if monday <= trade.date <= sunday:
            acc.record(trade)
    label = f"{monday.day}/{monday.month} - {sunday.day}/{sunday.month}"
    return acc.freeze(monday.isoformat(), label, notional_per_unit)
