"""Trade Journal Analytics — statistics derived from a trader's own log.

Every function here is pure: it takes a snapshot of validated trade
records plus explicit parameters and returns freshly built results.
Nothing is cached and inputs are never mutated.

Key components
--------------
**Records & normalisation**

TradeRecord           Validated, immutable record for one logged trade
realized_return       The single outcome -> percent return mapping
chronological         Stable (date, time) ordering

**Performance**

equity_curve / max_drawdown   Running balance and worst decline
detect_streaks                Current and longest win/loss runs
summarize                     Dashboard metrics (win rate, profit factor...)
risk_of_ruin                  Gambler's-ruin estimate per risk level
project_equity                Forward-looking equity projection

**Breakdowns**

performance_by_weekday / performance_by_hour / monthly_breakdown
daily_summary / weekly_recap
performance_by_pair / direction_breakdown / rr_distribution
confluence_stats / emotion_stats
evaluate_goal                 Monthly goal progress

**Boundary**

load_trades           Read .json / .csv trade files
TradeExporter         CSV (BOM, fully quoted) and JSON export
TradeFilter           Date, time, weekday, pair, outcome, tag filters
build_report          Everything above in one dict
"""

from .record import TradeRecord
from .outcome import classify, currency_pnl, is_loss, is_win, realized_return
from .chronology import chronological
from .buckets import BucketStats
from .equity import DrawdownSummary, EquityPoint, equity_curve, final_equity, max_drawdown
from .streaks import StreakSummary, detect_streaks
from .session_analysis import (
    MonthStats,
    daily_summary,
    month_stats,
    monthly_breakdown,
    performance_by_hour,
    performance_by_weekday,
    weekly_recap,
)
from .confluence import TagStats, confluence_stats, emotion_stats
from .risk_of_ruin import RiskOfRuinTable, risk_of_ruin, ruin_probability
from .projection import EquityProjection, project_equity
from .metrics import PerformanceSummary, summarize
from .breakdown import direction_breakdown, performance_by_pair, rr_distribution
from .goals import GoalProgress, MonthlyGoal, evaluate_goal, goal_progress
from .filters import TradeFilter
from .export import TradeExporter, parse_csv
from .loader import load_goals, load_trades
from .report import build_report

__all__ = [
    "TradeRecord",
    "classify",
    "currency_pnl",
    "is_loss",
    "is_win",
    "realized_return",
    "chronological",
    "BucketStats",
    "DrawdownSummary",
    "EquityPoint",
    "equity_curve",
    "final_equity",
    "max_drawdown",
    "StreakSummary",
    "detect_streaks",
    "MonthStats",
    "daily_summary",
    "month_stats",
    "monthly_breakdown",
    "performance_by_hour",
    "performance_by_weekday",
    "weekly_recap",
    "TagStats",
    "confluence_stats",
    "emotion_stats",
    "RiskOfRuinTable",
    "risk_of_ruin",
    "ruin_probability",
    "EquityProjection",
    "project_equity",
    "PerformanceSummary",
    "summarize",
    "direction_breakdown",
    "performance_by_pair",
    "rr_distribution",
    "GoalProgress",
    "MonthlyGoal",
    "evaluate_goal",
    "goal_progress",
    "TradeFilter",
    "TradeExporter",
    "parse_csv",
    "load_goals",
    "load_trades",
    "build_report",
]
