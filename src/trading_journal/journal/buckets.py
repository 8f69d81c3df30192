"""Shared bucket accumulator for the grouped breakdowns.

Weekday, hour, month, pair and week summaries all reduce to the same
counters; :class:`BucketStats` is the immutable result handed to
callers and :class:`_BucketAccumulator` the mutable tally used while
walking the trades.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ..core.enums import Outcome
from .outcome import DEFAULT_NOTIONAL_PER_UNIT, is_loss, is_win, realized_return, safe_ratio
from .record import TradeRecord


@dataclass(frozen=True)
class BucketStats:
    """Per-bucket counts and win rate.

    ``win_rate`` is a fraction in [0, 1] and is 0.0 for an empty bucket.
    ``pnl`` is in account currency, ``return_pct`` in percent units.
    """

    key: str
    label: str
    trades: int = 0
    wins: int = 0
    losses: int = 0
    breakevens: int = 0
    win_rate: float = 0.0
    return_pct: float = 0.0
    pnl: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class _BucketAccumulator:
    """Mutable tally for one bucket."""

    __slots__ = ("trades", "wins", "losses", "breakevens", "return_pct")

    def __init__(self) -> None:
        self.trades = 0
        self.wins = 0
        self.losses = 0
        self.breakevens = 0
        self.return_pct = 0.0

    def record(self, trade: TradeRecord) -> None:
        self.trades += 1
        self.return_pct += realized_return(trade)
        if is_win(trade):
            self.wins += 1
        elif is_loss(trade):
            self.losses += 1
        elif trade.outcome == Outcome.BREAKEVEN:
            self.breakevens += 1

    def freeze(
        self,
        key: str,
        label: str,
        notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
    ) -> BucketStats:
        return BucketStats(
            key=key,
            label=label,
            trades=self.trades,
            wins=self.wins,
            losses=self.losses,
            breakevens=self.breakevens,
            win_rate=safe_ratio(self.wins, self.trades),
            return_pct=self.return_pct,
            pnl=self.return_pct * notional_per_unit,
        )
