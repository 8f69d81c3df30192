"""Trade filtering for the journal views.

Every criterion left empty matches all trades; multi-value criteria
match when the trade has any of the selected values.
"""

from __future__ import annotations

from datetime import date as Date
from datetime import time as Time
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Direction, Outcome
from .record import MIDNIGHT, TradeRecord


class TradeFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: Date | None = None
    end_date: Date | None = None
    start_time: Time | None = None
    end_time: Time | None = None
    days_of_week: frozenset[int] = Field(default_factory=frozenset)  # 0=Sunday
    pairs: frozenset[str] = Field(default_factory=frozenset)
    directions: frozenset[Direction] = Field(default_factory=frozenset)
    outcomes: frozenset[Outcome] = Field(default_factory=frozenset)
    confluences_pro: frozenset[str] = Field(default_factory=frozenset)
    confluences_contro: frozenset[str] = Field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return self == TradeFilter()

    def matches(self, trade: TradeRecord) -> bool:
        if self.start_date and trade.date < self.start_date:
            return False
        if self.end_date and trade.date > self.end_date:
            return False
        if self.start_time or self.end_time:
            at = trade.time or MIDNIGHT
            if self.start_time and at < self.start_time:
                return False
            if self.end_time and at > self.end_time:
                return False
        if self.days_of_week and trade.weekday not in self.days_of_week:
            return False
        if self.pairs and trade.pair not in self.pairs:
            return False
        if self.directions and trade.direction not in self.directions:
            return False
        if self.outcomes and trade.outcome not in self.outcomes:
            return False
        if self.confluences_pro and not self.confluences_pro.intersection(trade.confluences_pro):
            return False
        if self.confluences_contro and not self.confluences_contro.intersection(
            trade.confluences_contro
        ):
            return False
        return True

    def apply(self, trades: Iterable[TradeRecord]) -> list[TradeRecord]:
        return [t for t in trades if self.matches(t)]
