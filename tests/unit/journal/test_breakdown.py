"""Tests for pair, direction and risk/reward breakdowns."""

import pytest

from trading_journal.core.enums import Outcome
from trading_journal.journal.breakdown import (
    RR_BUCKETS,
    direction_breakdown,
    performance_by_pair,
    realized_r,
    rr_distribution,
)

from .conftest import make_trade, scenario_trades


class TestByPair:
    def test_best_return_first(self):
        trades = [
            make_trade(Outcome.STOP_LOSS, pair="GBPUSD"),
            make_trade(Outcome.TARGET, pair="EURUSD"),
            make_trade(Outcome.TARGET, pair="XAUUSD", target=5.0),
        ]
        pairs = performance_by_pair(trades)
        assert [p.key for p in pairs] == ["XAUUSD", "EURUSD", "GBPUSD"]
        assert pairs[0].pnl == pytest.approx(500.0)

    def test_groups_trades(self, sample_trades):
        eur = next(p for p in performance_by_pair(sample_trades) if p.key == "EURUSD")
        assert eur.trades == 2
        assert eur.win_rate == 1.0


class TestDirection:
    def test_split_per_outcome(self, sample_trades):
        splits = {d.outcome: d for d in direction_breakdown(sample_trades)}
        assert splits["target"].long == 1
        assert splits["stop_loss"].short == 1
        assert splits["stop_loss"].short_pct == 100.0
        assert splits["breakeven"].long_pct == 0.0


class TestRR:
    @pytest.mark.parametrize("outcome,expected", [
        (Outcome.TARGET, 2.0),
        (Outcome.PARTIAL, 1.0),
        (Outcome.STOP_LOSS, -1.0),
        (Outcome.BREAKEVEN, 0.0),
        (Outcome.UNFILLED, None),
    ])
    def test_realized_r_from_target_and_stop(self, outcome, expected):
        assert realized_r(make_trade(outcome)) == expected

    def test_recorded_rr_wins(self):
        assert realized_r(make_trade(rr=3.5)) == 3.5

    def test_unknown_plan(self):
        assert realized_r(make_trade(target=0.0)) is None

    def test_distribution(self):
        dist = rr_distribution(scenario_trades())
        assert len(dist) == len(RR_BUCKETS)
        counts = {row["range"]: row["count"] for row in dist}
        assert counts["-1"] == 1
        assert counts["1 to 2"] == 1
        assert counts["2 to 3"] == 1
        assert sum(counts.values()) == 3
