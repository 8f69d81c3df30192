"""Win / loss streak detection.

A win (target or partial) extends the win run and breaks the loss run,
a stop-loss does the opposite, and a neutral trade (breakeven or
unfilled) breaks both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import Classification
from .chronology import chronological
from .outcome import classify
from .record import TradeRecord


@dataclass(frozen=True)
class StreakSummary:
    current_streak: int = 0
    current_type: Classification = Classification.NEUTRAL
    max_win_streak: int = 0
    max_loss_streak: int = 0


def detect_streaks(trades: Iterable[TradeRecord]) -> StreakSummary:
    """Current and longest win/loss runs over the chronological trades."""
    win_run = 0
    loss_run = 0
    max_win = 0
    max_loss = 0
    last = Classification.NEUTRAL

    for trade in chronological(trades):
        last = classify(trade.outcome)
        if last == Classification.WIN:
            win_run += 1
            loss_run = 0
            max_win = max(max_win, win_run)
        elif last == Classification.LOSS:
            loss_run += 1
            win_run = 0
            max_loss = max(max_loss, loss_run)
        else:
            win_run = 0
            loss_run = 0

    if last == Classification.WIN:
        current = win_run
    elif last == Classification.LOSS:
        current = loss_run
    else:
        current = 0

    return StreakSummary(
        current_streak=current,
        current_type=last,
        max_win_streak=max_win,
        max_loss_streak=max_loss,
    )
