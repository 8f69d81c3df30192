"""Full analytics report.

Assembles every journal metric into one JSON-serialisable dict.  All
parameters come from the :class:`AnalyticsConfig` passed in, so the
same trades and config always produce the same report.
"""

from __future__ import annotations

import logging
from datetime import date as Date
from typing import Any, Iterable, Sequence

from ..core.config import AnalyticsConfig
from ..core.enums import ConfluenceSide
from .breakdown import direction_breakdown, performance_by_pair, rr_distribution
from .confluence import confluence_stats, emotion_stats
from .equity import equity_curve, max_drawdown
from .goals import MonthlyGoal, evaluate_goal
from .metrics import summarize
from .projection import project_equity
from .record import TradeRecord
from .risk_of_ruin import risk_of_ruin
from .session_analysis import (
    monthly_breakdown,
    performance_by_hour,
    performance_by_weekday,
    weekly_recap,
)
from .streaks import detect_streaks

logger = logging.getLogger(__name__)


def build_report(
    trades: Iterable[TradeRecord],
    config: AnalyticsConfig | None = None,
    *,
    reference_date: Date | None = None,
    goals: Sequence[MonthlyGoal] = (),
) -> dict[str, Any]:
    """Compute every metric for *trades*.

    ``reference_date`` selects the week for the weekly recap; the recap
    is omitted when it is not given.
    """
    cfg = config or AnalyticsConfig()
    trades = list(trades)
    capital = cfg.initial_capital
    unit = cfg.notional_per_unit

    drawdown = max_drawdown(trades, unit)
    streaks = detect_streaks(trades)

    report: dict[str, Any] = {
        "initial_capital": capital,
        "notional_per_unit": unit,
        "summary": summarize(trades, capital, unit).to_dict(),
        "equity_curve": [
            {"label": p.label, "equity": p.equity}
            for p in equity_curve(trades, capital, unit)
        ],
        "drawdown": {
            "max_drawdown": drawdown.max_drawdown,
            "max_drawdown_pct": drawdown.max_drawdown_pct,
        },
        "streaks": {
            "current_streak": streaks.current_streak,
            "current_type": streaks.current_type.value,
            "max_win_streak": streaks.max_win_streak,
            "max_loss_streak": streaks.max_loss_streak,
        },
        "by_weekday": [b.to_dict() for b in performance_by_weekday(trades, unit)],
        "by_hour": [
            b.to_dict()
            for b in performance_by_hour(trades, cfg.first_hour, cfg.last_hour, unit)
        ],
        "monthly": [m.to_dict() for m in monthly_breakdown(trades, capital, unit)],
        "by_pair": [b.to_dict() for b in performance_by_pair(trades, unit)],
        "direction": [d.to_dict() for d in direction_breakdown(trades)],
        "rr_distribution": rr_distribution(trades),
        "confluences_pro": [
            s.to_dict() for s in confluence_stats(trades, ConfluenceSide.PRO)
        ],
        "confluences_contro": [
            s.to_dict() for s in confluence_stats(trades, ConfluenceSide.CONTRO)
        ],
        "emotions": [s.to_dict() for s in emotion_stats(trades)],
        "risk_of_ruin": risk_of_ruin(trades, cfg.risk_levels).to_dict(),
        "projection": project_equity(trades, capital, cfg.projection_months).to_dict(),
        "goals": [evaluate_goal(trades, g, unit).to_dict() for g in goals],
    }
    if reference_date is not None:
        report["weekly_recap"] = weekly_recap(trades, reference_date, unit).to_dict()

    logger.info("Built analytics report for %d trades", len(trades))
    return report
