"""Shared fixtures for the trading-journal test suite."""

from __future__ import annotations

import pytest

from trading_journal.core.config import AnalyticsConfig
from trading_journal.journal.record import TradeRecord


# ---------------------------------------------------------------------------
# Raw rows as the journal API returns them
# ---------------------------------------------------------------------------

@pytest.fixture
def api_rows() -> list[dict]:
    """Three trades in the camelCase shape of the journal API."""
    return [
        {
            "id": 1,
            "date": "2024-03-04",
            "time": "09:30",
            "pair": "EURUSD",
            "direction": "long",
            "target": 2,
            "stopLoss": 1,
            "result": "target",
            "emotion": "Fiducioso",
            "confluencesPro": ["Trend forte", "Livello chiave"],
            "confluencesContro": [],
            "notes": "Clean break, \"textbook\" retest",
            "imageUrls": [],
        },
        {
            "id": 2,
            "date": "2024-03-05",
            "time": "14:00",
            "pair": "GBPUSD",
            "direction": "short",
            "target": 3,
            "stopLoss": 1,
            "result": "stop_loss",
            "emotion": "FOMO",
            "confluencesPro": ["Trend forte"],
            "confluencesContro": ["Notizie in arrivo"],
            "notes": None,
            "imageUrls": None,
        },
        {
            "id": 3,
            "date": "2024-04-02",
            "time": None,
            "pair": "EURUSD",
            "direction": "long",
            "target": 2,
            "stopLoss": 1,
            "result": "parziale",
            "emotion": "Neutrale",
            "confluencesPro": ["Livello chiave"],
            "confluencesContro": None,
            "notes": "",
        },
    ]


@pytest.fixture
def sample_trades(api_rows) -> list[TradeRecord]:
    return [TradeRecord.from_mapping(row, index=i) for i, row in enumerate(api_rows)]


@pytest.fixture
def analytics_config() -> AnalyticsConfig:
    return AnalyticsConfig()
