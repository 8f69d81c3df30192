"""Pair, direction and risk/reward breakdowns."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Iterable

from ..core.enums import Direction, Outcome
from .buckets import BucketStats, _BucketAccumulator
from .outcome import DEFAULT_NOTIONAL_PER_UNIT, safe_ratio
from .record import TradeRecord

# (label, lower bound exclusive, upper bound inclusive)
RR_BUCKETS: list[tuple[str, float, float]] = [
    ("< -1", float("-inf"), -1.01),
    ("-1", -1.01, -0.99),
    ("-1 to 0", -0.99, -0.01),
    ("0", -0.01, 0.01),
    ("0 to 1", 0.01, 0.99),
    ("1 to 2", 0.99, 1.99),
    ("2 to 3", 1.99, 2.99),
    ("3 to 4", 2.99, 3.99),
    ("> 4", 3.99, float("inf")),
]


@dataclass(frozen=True)
class DirectionSplit:
    outcome: str
    long: int
    short: int
    long_pct: float
    short_pct: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome,
            "long": self.long,
            "short": self.short,
            "long_pct": self.long_pct,
            "short_pct": self.short_pct,
        }


def performance_by_pair(
    trades: Iterable[TradeRecord],
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> list[BucketStats]:
    """Per-pair stats, best percent return first."""
    pairs: dict[str, _BucketAccumulator] = defaultdict(_BucketAccumulator)
    for trade in trades:
        pairs[trade.pair].record(trade)
    stats = [acc.freeze(pair, pair, notional_per_unit) for pair, acc in pairs.items()]
    stats.sort(key=lambda s: (-s.return_pct, s.key))
    return stats


def direction_breakdown(trades: Iterable[TradeRecord]) -> list[DirectionSplit]:
    """Long/short split of the trades ending in each outcome."""
    counts = {o: {Direction.LONG: 0, Direction.SHORT: 0} for o in Outcome}
    for trade in trades:
        counts[trade.outcome][trade.direction] += 1

    result = []
    for outcome, split in counts.items():
        total = split[Direction.LONG] + split[Direction.SHORT]
        result.append(DirectionSplit(
            outcome=outcome.value,
            long=split[Direction.LONG],
            short=split[Direction.SHORT],
            long_pct=safe_ratio(split[Direction.LONG], total) * 100,
            short_pct=safe_ratio(split[Direction.SHORT], total) * 100,
        ))
    return result


def realized_r(trade: TradeRecord) -> float | None:
    """Realized R-multiple, or None when it cannot be determined.

    Uses the recorded risk/reward when present, otherwise estimates it
    from target and stop.  A stop-out is -1R by definition.
    """
    if trade.outcome == Outcome.UNFILLED:
        return None
    if trade.rr:
        planned = trade.rr
    elif trade.target > 0 and trade.stop_loss > 0:
        planned = trade.target / trade.stop_loss
    else:
        return None

    if trade.outcome == Outcome.STOP_LOSS:
        return -1.0
    if trade.outcome == Outcome.PARTIAL:
        return planned * 0.5
    if trade.outcome == Outcome.BREAKEVEN:
        return 0.0
    return planned


def rr_distribution(trades: Iterable[TradeRecord]) -> list[dict[str, Any]]:
    """Count realized R-multiples into the fixed :data:`RR_BUCKETS`."""
    counts = [0] * len(RR_BUCKETS)
    for trade in trades:
        r = realized_r(trade)
        if r is None:
            continue
        for i, (_, low, high) in enumerate(RR_BUCKETS):
            if low < r <= high:
                counts[i] += 1
                break
    return [
        {"range": label, "count": n}
        for (label, _, _), n in zip(RR_BUCKETS, counts)
    ]
