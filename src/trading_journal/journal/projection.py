"""Forward-looking equity projection.

Answers "where could this account be in a year?" by compounding the
journal's per-trade expectancy month by month under expected, optimistic
and pessimistic scenarios.

The figures assume the future resembles the logged past; results carry
:data:`PROJECTION_DISCLAIMER`.

Usage::

    result = project_equity(trades, initial_capital=10_000, months=12)
    result.points[-1].expected
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable

from .equity import DEFAULT_INITIAL_CAPITAL
from .outcome import is_loss, is_win, realized_return
from .record import TradeRecord

logger = logging.getLogger(__name__)

MIN_TRADES = 3
OPTIMISTIC_FACTOR = 1.5
PESSIMISTIC_FACTOR = 0.5
# Worst monthly change the pessimistic scenario is allowed
PESSIMISTIC_FLOOR = -0.05

PROJECTION_DISCLAIMER = (
    "Projections extrapolate past results and assume future trades behave "
    "like logged ones. They are estimates, not guarantees."
)


@dataclass(frozen=True)
class ProjectionPoint:
    month: str
    expected: float
    optimistic: float
    pessimistic: float


@dataclass(frozen=True)
class EquityProjection:
    """Scenario projection; ``sufficient_data`` is False below 3 trades."""

    sufficient_data: bool
    classified_trades: int
    expected_return: float = 0.0
    trades_per_month: int = 0
    growth_pct: float = 0.0
    points: list[ProjectionPoint] = field(default_factory=list)
    disclaimer: str = PROJECTION_DISCLAIMER

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ------------------------------------------------------------------ #
# Scenario projection                                                  #
# ------------------------------------------------------------------ #

def project_equity(
    trades: Iterable[TradeRecord],
    initial_capital: float = DEFAULT_INITIAL_CAPITAL,
    months: int = 12,
) -> EquityProjection:
    """Compound per-trade expectancy over *months*.

    Expected return per trade is ``p*avg_win - (1-p)*avg_loss`` in
    percent; the journal is assumed to cover three months, so the monthly
    trade rate is a third of the classified trade count.
    """
    wins = []
    losses = []
    for trade in trades:
        if is_win(trade):
            wins.append(realized_return(trade))
        elif is_loss(trade):
            losses.append(trade.stop_loss)

    total = len(wins) + len(losses)
    if total < MIN_TRADES:
        return EquityProjection(sufficient_data=False, classified_trades=total)

    p = len(wins) / total
    avg_win = sum(wins) / len(wins) if wins else 0.0
    avg_loss = sum(losses) / len(losses) if losses else 0.0
    expected = p * avg_win - (1 - p) * avg_loss
    per_month = max(1, math.ceil(total / 3))

    expected_cap = optimistic_cap = pessimistic_cap = initial_capital
    points = []
    for month in range(months + 1):
        points.append(ProjectionPoint(
            month=f"M{month}",
            expected=round(expected_cap, 2),
            optimistic=round(optimistic_cap, 2),
            pessimistic=round(pessimistic_cap, 2),
        ))
        monthly = expected * per_month / 100
        # A balance that reaches zero stays there
        expected_cap = max(0.0, expected_cap * (1 + monthly))
        optimistic_cap = max(0.0, optimistic_cap * (1 + monthly * OPTIMISTIC_FACTOR))
        pessimistic_cap = max(
            0.0, pessimistic_cap * (1 + max(PESSIMISTIC_FLOOR, monthly * PESSIMISTIC_FACTOR))
        )

    growth = (points[-1].expected - initial_capital) / initial_capital * 100
    logger.debug(
        "Projection: n=%d expected=%.4f per_month=%d growth=%.2f",
        total, expected, per_month, growth,
    )
    return EquityProjection(
        sufficient_data=True,
        classified_trades=total,
        expected_return=expected,
        trades_per_month=per_month,
        growth_pct=growth,
        points=points,
    )


