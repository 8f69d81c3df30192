"""Headline performance metrics for a set of trades.

The numbers on the journal's dashboard cards: win rate, profit factor,
average win and loss, average risk/reward and expectancy.  Win and loss
sizes are percent units; ``net_pnl`` and ``final_equity`` are currency.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable

from ..core.enums import Direction, Outcome
from .equity import DEFAULT_INITIAL_CAPITAL
from .outcome import DEFAULT_NOTIONAL_PER_UNIT, is_loss, is_win, realized_return, safe_ratio
from .record import TradeRecord


@dataclass(frozen=True)
class PerformanceSummary:
    """Dashboard metrics.

    ``profit_factor`` is None when there are winning trades but no
    losing ones (an unbounded ratio), and 0.0 when there are neither.
    """

    total_trades: int
    wins: int
    losses: int
    outcomes: dict[str, int] = field(default_factory=dict)
    longs: int = 0
    shorts: int = 0
    win_rate: float = 0.0
    gross_win: float = 0.0
    gross_loss: float = 0.0
    profit_factor: float | None = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    avg_rr: float = 0.0
    expectancy: float = 0.0
    total_return_pct: float = 0.0
    net_pnl: float = 0.0
    final_equity: float = DEFAULT_INITIAL_CAPITAL

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(
    trades: Iterable[TradeRecord],
    initial_capital: float = DEFAULT_INITIAL_CAPITAL,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> PerformanceSummary:
    trades = list(trades)
    outcomes = {o.value: 0 for o in Outcome}
    win_sizes: list[float] = []
    loss_sizes: list[float] = []
    rr_values: list[float] = []
    longs = 0
    total_return = 0.0

    for trade in trades:
        outcomes[trade.outcome.value] += 1
        total_return += realized_return(trade)
        if trade.direction == Direction.LONG:
            longs += 1
        if trade.rr is not None and trade.rr > 0:
            rr_values.append(trade.rr)
        if is_win(trade):
            win_sizes.append(realized_return(trade))
        elif is_loss(trade):
            loss_sizes.append(trade.stop_loss)

    total = len(trades)
    gross_win = sum(win_sizes)
    gross_loss = sum(loss_sizes)

    if gross_loss > 0:
        profit_factor: float | None = gross_win / gross_loss
    elif gross_win > 0:
        profit_factor = None
    else:
        profit_factor = 0.0

    avg_win = safe_ratio(gross_win, len(win_sizes))
    avg_loss = safe_ratio(gross_loss, len(loss_sizes))
    if rr_values:
        avg_rr = sum(rr_values) / len(rr_values)
    elif avg_loss > 0:
        avg_rr = avg_win / avg_loss
    else:
        avg_rr = avg_win

    win_rate = safe_ratio(len(win_sizes), total)
    expectancy = win_rate * avg_win - (1 - win_rate) * avg_loss if total else 0.0
    net_pnl = total_return * notional_per_unit

    return PerformanceSummary(
        total_trades=total,
        wins=len(win_sizes),
        losses=len(loss_sizes),
        outcomes=outcomes,
        longs=longs,
        shorts=total - longs,
        win_rate=win_rate,
        gross_win=gross_win,
        gross_loss=gross_loss,
        profit_factor=profit_factor,
        avg_win=avg_win,
        avg_loss=avg_loss,
        avg_rr=avg_rr,
        expectancy=expectancy,
        total_return_pct=total_return,
        net_pnl=net_pnl,
        final_equity=initial_capital + net_pnl,
    )
