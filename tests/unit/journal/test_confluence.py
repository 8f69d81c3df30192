"""Tests for confluence and mood statistics."""

import pytest

from trading_journal.core.enums import ConfluenceSide, Outcome
from trading_journal.journal.confluence import confluence_stats, emotion_stats

from .conftest import make_trade


class TestConfluence:
    def test_pro_side(self, sample_trades):
        stats = confluence_stats(sample_trades, side=ConfluenceSide.PRO)
        assert [s.tag for s in stats] == ["Livello chiave", "Trend forte"]
        trend = stats[1]
        assert trend.count == 2
        assert trend.outcomes["target"] == 1
        assert trend.outcomes["stop_loss"] == 1
        assert trend.win_rate == pytest.approx(0.5)

    def test_contro_side(self, sample_trades):
        stats = confluence_stats(sample_trades, side="contro")
        assert len(stats) == 1
        assert stats[0].tag == "Notizie in arrivo"
        assert stats[0].win_rate == 0.0

    def test_both_sides_by_default(self, sample_trades):
        tags = {s.tag for s in confluence_stats(sample_trades)}
        assert tags == {"Trend forte", "Livello chiave", "Notizie in arrivo"}

    def test_every_outcome_has_a_counter(self, sample_trades):
        stats = confluence_stats(sample_trades)
        assert set(stats[0].outcomes) == {o.value for o in Outcome}

    def test_duplicate_tag_counts_once_per_trade(self):
        trade = make_trade(confluences_pro=["A", "A"])
        stats = confluence_stats([trade])
        assert stats[0].count == 1

    def test_counts_sum_to_tagged_trades(self, sample_trades):
        stats = confluence_stats(sample_trades, side=ConfluenceSide.PRO)
        for s in stats:
            assert sum(s.outcomes.values()) == s.count

    def test_share_counts_untagged_trades(self, sample_trades):
        stats = confluence_stats(sample_trades, side=ConfluenceSide.CONTRO)
        assert stats[0].share == pytest.approx(1 / 3)
        assert stats[0].to_dict()["share"] == stats[0].share

    def test_empty(self):
        assert confluence_stats([]) == []


class TestEmotion:
    def test_groups_by_emotion(self):
        trades = [
            make_trade(Outcome.TARGET, emotion="Calmo"),
            make_trade(Outcome.PARTIAL, emotion="Calmo"),
            make_trade(Outcome.STOP_LOSS, emotion="FOMO"),
            make_trade(Outcome.TARGET, emotion=""),
        ]
        stats = emotion_stats(trades)
        assert [s.tag for s in stats] == ["Calmo", "", "FOMO"]
        assert stats[0].win_rate == 1.0
        assert stats[2].win_rate == 0.0

    def test_share_of_all_trades(self):
        trades = [
            make_trade(emotion="Calmo"),
            make_trade(emotion="Calmo"),
            make_trade(emotion="Paura"),
            make_trade(emotion=""),
        ]
        shares = {s.tag: s.share for s in emotion_stats(trades)}
        assert shares == {"Calmo": 0.5, "Paura": 0.25, "": 0.25}
        assert sum(shares.values()) == pytest.approx(1.0)

    def test_empty(self):
        assert emotion_stats([]) == []
