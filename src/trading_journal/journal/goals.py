"""Monthly goal tracking.

A trader sets up to three targets for a month (number of trades, win
rate in percent, profit in account currency) and the journal reports
how far the month's actual results have got towards each.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .outcome import DEFAULT_NOTIONAL_PER_UNIT
from .record import TradeRecord
from .session_analysis import month_stats


class MonthlyGoal(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900, le=9999)
    target_trades: int | None = Field(
        default=None, validation_alias=AliasChoices("target_trades", "targetTrades"),
    )
    target_win_rate: float | None = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("target_win_rate", "targetWinRate"),
    )
    target_profit: float | None = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("target_profit", "targetProfit"),
    )


@dataclass(frozen=True)
class GoalProgress:
    month: int
    year: int
    actual_trades: int
    actual_win_rate: float
    actual_profit: float
    trades_progress: float
    win_rate_progress: float
    profit_progress: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def goal_progress(actual: float, target: float | None) -> float:
    """Percent of *target* reached, in [0, 100].

    A missing or non-positive target yields 0 rather than an error.
    """
    if target is None or target <= 0:
        return 0.0
    return max(0.0, min(100.0, actual / target * 100.0))


def evaluate_goal(
    trades: Iterable[TradeRecord],
    goal: MonthlyGoal,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> GoalProgress:
    stats = month_stats(trades, goal.year, goal.month, notional_per_unit)
    win_rate_pct = stats.win_rate * 100
    return GoalProgress(
        month=goal.month,
        year=goal.year,
        actual_trades=stats.trades,
        actual_win_rate=win_rate_pct,
        actual_profit=stats.pnl,
        trades_progress=goal_progress(stats.trades, goal.target_trades),
        win_rate_progress=goal_progress(win_rate_pct, goal.target_win_rate),
        profit_progress=goal_progress(stats.pnl, goal.target_profit),
    )
