"""Shared helpers for journal tests."""

from __future__ import annotations

from datetime import date, time, timedelta

from trading_journal.core.enums import Direction, Outcome
from trading_journal.journal.record import TradeRecord


def make_trade(
    outcome: Outcome | str = Outcome.TARGET,
    *,
    day: date | str = date(2024, 1, 1),
    at: time | str | None = time(10, 0),
    target: float = 2.0,
    stop_loss: float = 1.0,
    pair: str = "EURUSD",
    direction: Direction | str = Direction.LONG,
    **extra,
) -> TradeRecord:
    """Create a validated trade with sensible defaults."""
    return TradeRecord(
        date=day,
        time=at,
        pair=pair,
        direction=direction,
        target=target,
        stop_loss=stop_loss,
        outcome=outcome,
        **extra,
    )


def make_series(outcomes: list[Outcome | str], start: date = date(2024, 1, 1)) -> list[TradeRecord]:
    """One trade per day, in the given outcome order."""
    return [
        make_trade(o, day=start + timedelta(days=i))
        for i, o in enumerate(outcomes)
    ]


def scenario_trades() -> list[TradeRecord]:
    """Target(+2), stop(-1), partial(+1) on consecutive days."""
    return make_series([Outcome.TARGET, Outcome.STOP_LOSS, Outcome.PARTIAL])
