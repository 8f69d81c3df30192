"""Outcome-to-return normalizer.

The single place where a trade's outcome becomes a number.  Every
figure the journal reports (equity curve, monthly PnL, metrics cards,
goal progress) goes through :func:`realized_return`, and every currency
figure through :func:`currency_pnl`, so the partial-fill convention can
never drift between views.

Returns are in percent units: a ``target`` trade with ``target=2``
returns ``2.0``.  Currency figures multiply that by one fixed
``notional_per_unit`` (default 100, i.e. 1% of a 10 000 account).
"""

from __future__ import annotations

from typing import Iterable

from ..core.enums import Classification, Outcome
from .record import TradeRecord

PARTIAL_FRACTION = 0.5
DEFAULT_NOTIONAL_PER_UNIT = 100.0

WIN_OUTCOMES = frozenset({Outcome.TARGET, Outcome.PARTIAL})
LOSS_OUTCOMES = frozenset({Outcome.STOP_LOSS})


def realized_return(trade: TradeRecord) -> float:
    """Percent return attributed to *trade* by its outcome."""
    if trade.outcome == Outcome.TARGET:
        return trade.target
    if trade.outcome == Outcome.STOP_LOSS:
        return -trade.stop_loss
    if trade.outcome == Outcome.PARTIAL:
        return trade.target * PARTIAL_FRACTION
    # breakeven and unfilled trades move nothing
    return 0.0


def currency_pnl(
    trade: TradeRecord, notional_per_unit: float = DEFAULT_NOTIONAL_PER_UNIT
) -> float:
    """Realized return expressed in account currency."""
    return realized_return(trade) * notional_per_unit


def classify(outcome: Outcome) -> Classification:
    if outcome in WIN_OUTCOMES:
        return Classification.WIN
    if outcome in LOSS_OUTCOMES:
        return Classification.LOSS
    return Classification.NEUTRAL


def is_win(trade: TradeRecord) -> bool:
    return trade.outcome in WIN_OUTCOMES


def is_loss(trade: TradeRecord) -> bool:
    return trade.outcome in LOSS_OUTCOMES


def total_return(trades: Iterable[TradeRecord]) -> float:
    """Sum of percent returns."""
    return sum((realized_return(t) for t in trades), 0.0)


def safe_ratio(numerator: float, denominator: float) -> float:
    """``numerator / denominator``, or 0.0 when the denominator is 0."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
