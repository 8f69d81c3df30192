"""Equity curve and drawdown.

Walks trades in chronological order, adding each trade's currency PnL
to a running balance that starts at the initial capital.

Usage::

    curve = equity_curve(trades, initial_capital=10_000)
    curve[-1].equity        # final balance
    dd = max_drawdown(trades)
    dd.max_drawdown_pct     # 0..100
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .chronology import chronological
from .outcome import DEFAULT_NOTIONAL_PER_UNIT, currency_pnl
from .record import TradeRecord

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPITAL = 10_000.0
START_LABEL = "Start"


@dataclass(frozen=True)
class EquityPoint:
    label: str
    equity: float


@dataclass(frozen=True)
class DrawdownSummary:
    """Largest peak-to-trough decline of cumulative gain.

    ``max_drawdown`` is in account currency, ``max_drawdown_pct`` is a
    percentage in [0, 100].
    """

    max_drawdown: float = 0.0
    max_drawdown_pct: float = 0.0
    peak_gain: float = 0.0
    total_pnl: float = 0.0


def equity_curve(
    trades: Iterable[TradeRecord],
    initial_capital: float = DEFAULT_INITIAL_CAPITAL,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> list[EquityPoint]:
    """Balance after every trade, preceded by a synthetic Start point."""
    equity = initial_capital
    curve = [EquityPoint(START_LABEL, equity)]
    for trade in chronological(trades):
        equity += currency_pnl(trade, notional_per_unit)
        curve.append(EquityPoint(trade.date.strftime("%m-%d"), equity))
    return curve


def final_equity(
    trades: Iterable[TradeRecord],
    initial_capital: float = DEFAULT_INITIAL_CAPITAL,
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> float:
    return equity_curve(trades, initial_capital, notional_per_unit)[-1].equity


def max_drawdown(
    trades: Iterable[TradeRecord],
    notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT,
) -> DrawdownSummary:
    """Maximum drawdown of zero-based cumulative gain.

    The percentage is taken against the larger of the peak gain and the
    absolute final PnL, so an account that only ever lost still reports
    a meaningful figure.  It is 0 when both are 0 and never exceeds 100.
    """
    cumulative = 0.0
    peak = 0.0
    worst = 0.0

    for trade in chronological(trades):
        cumulative += currency_pnl(trade, notional_per_unit)
        if cumulative > peak:
            peak = cumulative
        drawdown = peak - cumulative
        if drawdown > worst:
            worst = drawdown

    reference = max(peak, abs(cumulative))
    pct = min(100.0, worst / reference * 100.0) if reference > 0 else 0.0

    logger.debug(
        "Drawdown computed: max=%.2f pct=%.2f peak=%.2f total=%.2f",
        worst, pct, peak, cumulative,
    )
    return DrawdownSummary(
        max_drawdown=worst,
        max_drawdown_pct=pct,
        peak_gain=peak,
        total_pnl=cumulative,
    )
