"""Confluence and mood statistics.

For every checklist tag a trader attached to trades (the "pro" factors
supporting the entry and the "contro" factors against it), and for
each emotion, counts how the tagged trades ended.  A trade
carrying three tags counts once towards each of them.

Usage::

    stats = confluence_stats(trades, side=ConfluenceSide.PRO)
    stats[0].tag, stats[0].win_rate
    moods = emotion_stats(trades)
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable

from ..core.enums import ConfluenceSide, Outcome
from .outcome import safe_ratio
from .record import TradeRecord


@dataclass(frozen=True)
class TagStats:
    """Outcome counts for one tag.

    ``outcomes`` always holds one counter per :class:`Outcome` value.
    ``win_rate`` = (target + partial) / count, 0.0 when count is 0.
    ``share`` is count over all trades analysed, in [0, 1].
    """

    tag: str
    count: int
    outcomes: dict[str, int] = field(default_factory=dict)
    win_rate: float = 0.0
    share: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "count": self.count,
            "outcomes": dict(self.outcomes),
            "win_rate": self.win_rate,
            "share": self.share,
        }


def _empty_counts() -> dict[Outcome, int]:
    return {o: 0 for o in Outcome}


def _aggregate(pairs: Iterable[tuple[str, Outcome]], n_trades: int) -> list[TagStats]:
    counts: dict[str, dict[Outcome, int]] = defaultdict(_empty_counts)
    for tag, outcome in pairs:
        counts[tag][outcome] += 1

    result = []
    for tag, per_outcome in counts.items():
        total = sum(per_outcome.values())
        wins = per_outcome[Outcome.TARGET] + per_outcome[Outcome.PARTIAL]
        result.append(TagStats(
            tag=tag,
            count=total,
            outcomes={o.value: n for o, n in per_outcome.items()},
            win_rate=safe_ratio(wins, total),
            share=safe_ratio(total, n_trades),
        ))
    result.sort(key=lambda s: (-s.count, s.tag))
    return result


def _tags_for(trade: TradeRecord, side: ConfluenceSide) -> set[str]:
    if side == ConfluenceSide.PRO:
        return set(trade.confluences_pro)
    if side == ConfluenceSide.CONTRO:
        return set(trade.confluences_contro)
    return set(trade.confluences_pro) | set(trade.confluences_contro)


def confluence_stats(
    trades: Iterable[TradeRecord],
    side: ConfluenceSide | str = ConfluenceSide.BOTH,
) -> list[TagStats]:
    """Per-tag stats, most used tags first."""
    side = ConfluenceSide(side)
    trades = list(trades)
    return _aggregate(
        (
            (tag, trade.outcome)
            for trade in trades
            for tag in _tags_for(trade, side)
        ),
        len(trades),
    )


def emotion_stats(trades: Iterable[TradeRecord]) -> list[TagStats]:
    """Per-emotion stats.

    Every trade counts, so the shares add up to 1; a trade logged
    without an emotion is grouped under the empty tag.
    """
    trades = list(trades)
    return _aggregate(((t.emotion, t.outcome) for t in trades), len(trades))
