"""Tests for win/loss streak detection."""

from datetime import date

from trading_journal.core.enums import Classification, Outcome
from trading_journal.journal.streaks import StreakSummary, detect_streaks

from .conftest import make_series, make_trade

T, S, P, B, U = (
    Outcome.TARGET,
    Outcome.STOP_LOSS,
    Outcome.PARTIAL,
    Outcome.BREAKEVEN,
    Outcome.UNFILLED,
)


def test_empty():
    assert detect_streaks([]) == StreakSummary()


def test_partial_extends_win_run():
    s = detect_streaks(make_series([T, P, T, S]))
    assert s.max_win_streak == 3
    assert s.max_loss_streak == 1
    assert s.current_streak == 1
    assert s.current_type == Classification.LOSS


def test_neutral_breaks_both_runs():
    s = detect_streaks(make_series([S, S, B, S, T, U, T]))
    assert s.max_loss_streak == 2
    assert s.max_win_streak == 1
    assert s.current_type == Classification.WIN
    assert s.current_streak == 1


def test_ending_on_neutral_resets_current():
    s = detect_streaks(make_series([T, T, B]))
    assert s.current_streak == 0
    assert s.current_type == Classification.NEUTRAL
    assert s.max_win_streak == 2


def test_uses_chronological_order():
    trades = [
        make_trade(S, day=date(2024, 1, 3)),
        make_trade(T, day=date(2024, 1, 1)),
        make_trade(T, day=date(2024, 1, 2)),
    ]
    s = detect_streaks(trades)
    assert s.max_win_streak == 2
    assert s.current_type == Classification.LOSS
