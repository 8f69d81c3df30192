"""Risk-of-ruin table using the classic gambler's-ruin approximation.

Derives the win probability and payoff ratio from the journal, then
estimates, for each candidate fraction of the account risked per trade,
the chance of losing the whole account before the edge plays out.

The figures are an estimate built on the assumption that future trades
look like past ones and are independent; they are not a guarantee.
Every result carries :data:`RUIN_DISCLAIMER` so the presentation layer
can show it next to the numbers.

Usage::

    table = risk_of_ruin(trades, risk_levels=[0.5, 1, 2, 3, 5])
    for level in table.levels:
        print(level.risk_pct, level.ruin_pct)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from .outcome import is_loss, is_win, realized_return
from .record import TradeRecord

logger = logging.getLogger(__name__)

DEFAULT_RISK_LEVELS: tuple[float, ...] = (0.5, 1.0, 2.0, 3.0, 5.0)

# Fallbacks when one side of the sample is empty
DEFAULT_WIN_PROBABILITY = 0.5
DEFAULT_AVG_WIN = 2.0
DEFAULT_AVG_LOSS = 1.0

RUIN_DISCLAIMER = (
    "Risk of ruin is a statistical estimate derived from past win rate and "
    "payoff ratio, assuming independent trades and a fixed risk per trade. "
    "It is not a guarantee of future results."
)


@dataclass(frozen=True)
class RuinLevel:
    risk_pct: float
    units_to_ruin: int
    ruin_pct: float


@dataclass(frozen=True)
class RiskOfRuinTable:
    """Inputs derived from the journal plus one row per risk level."""

    sample_size: int
    win_probability: float
    avg_win: float
    avg_loss: float
    payoff_ratio: float
    edge: float
    levels: list[RuinLevel] = field(default_factory=list)
    disclaimer: str = RUIN_DISCLAIMER

    def to_dict(self) -> dict[str, Any]:
        return {
            "sample_size": self.sample_size,
            "win_probability": self.win_probability,
            "avg_win": self.avg_win,
            "avg_loss": self.avg_loss,
            "payoff_ratio": self.payoff_ratio,
            "edge": self.edge,
            "levels": [
                {
                    "risk_pct": lvl.risk_pct,
                    "units_to_ruin": lvl.units_to_ruin,
                    "ruin_pct": lvl.ruin_pct,
                }
                for lvl in self.levels
            ],
            "disclaimer": self.disclaimer,
        }


def ruin_probability(p: float, payoff: float, risk_pct: float) -> float:
    """Risk of ruin in percent for win probability *p* and payoff *R*.

    Returns 100.0 whenever the edge ``p*R - (1-p)`` is not positive.
    """
    if risk_pct <= 0:
        raise ValueError(f"risk_pct must be positive, got {risk_pct}")

    q = 1.0 - p
    edge = p * payoff - q
    if edge <= 0:
        return 100.0

    units = math.floor(100.0 / risk_pct)

    if math.isclose(payoff, 1.0):
        ratio = q / p
        if ratio >= 1:
            return 100.0
        return min(100.0, ratio ** units * 100.0)

    loss_prob = q / (p * payoff)
    if loss_prob >= 1:
        return 100.0
    return min(100.0, loss_prob ** units * 100.0)


def risk_of_ruin(
    trades: Iterable[TradeRecord],
    risk_levels: Sequence[float] = DEFAULT_RISK_LEVELS,
) -> RiskOfRuinTable:
    """Build the risk-of-ruin table for the given trades.

    Only wins and losses inform the estimate.  With neither present
    there is nothing to estimate from and every level reports 0.0.
    """
    win_returns = []
    loss_sizes = []
    for trade in trades:
        if is_win(trade):
            win_returns.append(realized_return(trade))
        elif is_loss(trade):
            loss_sizes.append(trade.stop_loss)

    n = len(win_returns) + len(loss_sizes)
    p = len(win_returns) / n if n else DEFAULT_WIN_PROBABILITY
    avg_win = sum(win_returns) / len(win_returns) if win_returns else DEFAULT_AVG_WIN
    avg_loss = sum(loss_sizes) / len(loss_sizes) if loss_sizes else DEFAULT_AVG_LOSS
    # Losses recorded with a zero stop carry no size information
    payoff = avg_win / avg_loss if avg_loss > 0 else DEFAULT_AVG_WIN / DEFAULT_AVG_LOSS
    edge = p * payoff - (1.0 - p)

    levels = []
    for risk in risk_levels:
        if risk <= 0:
            raise ValueError(f"risk levels must be positive, got {risk}")
        ruin = ruin_probability(p, payoff, risk) if n else 0.0
        levels.append(RuinLevel(
            risk_pct=float(risk),
            units_to_ruin=math.floor(100.0 / risk),
            ruin_pct=ruin,
        ))

    logger.debug(
        "Risk of ruin: n=%d p=%.4f payoff=%.4f edge=%.4f", n, p, payoff, edge,
    )
    return RiskOfRuinTable(
        sample_size=n,
        win_probability=p,
        avg_win=avg_win,
        avg_loss=avg_loss,
        payoff_ratio=payoff,
        edge=edge,
        levels=levels,
    )
