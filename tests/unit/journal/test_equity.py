"""Tests for equity curve and drawdown."""

from datetime import date, time

import pytest

from trading_journal.core.enums import Outcome
from trading_journal.journal.chronology import chronological
from trading_journal.journal.equity import (
    START_LABEL,
    EquityPoint,
    equity_curve,
    final_equity,
    max_drawdown,
)

from .conftest import make_series, make_trade, scenario_trades


class TestChronology:
    def test_sorts_by_date_then_time(self):
        a = make_trade(day=date(2024, 1, 2), at=time(9, 0))
        b = make_trade(day=date(2024, 1, 1), at=time(15, 0))
        c = make_trade(day=date(2024, 1, 2), at=None)
        assert chronological([a, b, c]) == [b, c, a]

    def test_ties_keep_input_order(self):
        a = make_trade(Outcome.TARGET)
        b = make_trade(Outcome.STOP_LOSS)
        assert chronological([a, b]) == [a, b]
        assert chronological([b, a]) == [b, a]

    def test_input_not_mutated(self):
        trades = [make_trade(day=date(2024, 1, 3)), make_trade(day=date(2024, 1, 1))]
        original = list(trades)
        chronological(trades)
        assert trades == original


class TestEquityCurve:
    def test_empty(self):
        assert equity_curve([]) == [EquityPoint(START_LABEL, 10_000.0)]

    def test_single_trade_has_two_points(self):
        curve = equity_curve([make_trade(Outcome.TARGET, day=date(2024, 5, 7))])
        assert len(curve) == 2
        assert curve[1] == EquityPoint("05-07", 10_200.0)

    def test_scenario_final_equity(self):
        curve = equity_curve(scenario_trades(), initial_capital=10_000)
        assert [p.equity for p in curve] == [10_000, 10_200, 10_100, 10_200]
        assert final_equity(scenario_trades()) == 10_200

    def test_walks_in_chronological_order(self):
        late = make_trade(Outcome.STOP_LOSS, day=date(2024, 1, 5))
        early = make_trade(Outcome.TARGET, day=date(2024, 1, 1))
        curve = equity_curve([late, early])
        assert [p.label for p in curve] == ["Start", "01-01", "01-05"]
        assert curve[1].equity == 10_200

    def test_custom_capital_and_scale(self):
        curve = equity_curve(scenario_trades(), initial_capital=500, notional_per_unit=10)
        assert curve[-1].equity == 520


class TestDrawdown:
    def test_empty_is_zero(self):
        dd = max_drawdown([])
        assert dd.max_drawdown == 0.0
        assert dd.max_drawdown_pct == 0.0

    def test_scenario(self):
        dd = max_drawdown(scenario_trades())
        assert dd.max_drawdown == pytest.approx(100.0)
        # peak 200, total 200
        assert dd.max_drawdown_pct == pytest.approx(50.0)

    def test_all_losses_uses_total_as_reference(self):
        dd = max_drawdown(make_series([Outcome.STOP_LOSS, Outcome.STOP_LOSS]))
        assert dd.max_drawdown == pytest.approx(200.0)
        assert dd.max_drawdown_pct == pytest.approx(100.0)

    def test_percent_never_exceeds_hundred(self):
        # Falls 300 below the start, then recovers to -100
        trades = make_series([Outcome.STOP_LOSS] * 3 + [Outcome.TARGET])
        dd = max_drawdown(trades)
        assert dd.max_drawdown == pytest.approx(300.0)
        assert dd.max_drawdown_pct == 100.0

    def test_only_wins_has_no_drawdown(self):
        dd = max_drawdown(make_series([Outcome.TARGET, Outcome.PARTIAL]))
        assert dd.max_drawdown == 0.0
        assert dd.max_drawdown_pct == 0.0
