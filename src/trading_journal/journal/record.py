"""Validated trade record — the core data model.

A TradeRecord is what the journal stores for one logged trade: when it
was taken, on which pair and in which direction, how much was at stake
(target and stop as percentages), how it ended, and the trader's own
annotations (emotion, confluences, notes, screenshots).

Records are built once at the storage boundary.  Missing optional values
are defaulted there so analytics never has to guess, and anything out of
range is rejected with :class:`TradeValidationError`.
"""

from __future__ import annotations

import uuid
from datetime import date as Date
from datetime import time as Time
from typing import Any, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from ..core.enums import Direction, Outcome
from ..core.errors import TradeValidationError

MIDNIGHT = Time(0, 0)

# Fields where a stored NULL means "use the default"
_NULLABLE_DEFAULTS: dict[str, Any] = {
    "target": 0.0,
    "stop_loss": 0.0,
    "emotion": "",
    "notes": "",
    "confluences_pro": (),
    "confluences_contro": (),
    "image_urls": (),
}


class TradeRecord(BaseModel):
    """One logged trade.

    Accepts both the snake_case field names and the camelCase keys used
    by the journal's HTTP API (``stopLoss``, ``result``,
    ``confluencesPro`` ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Identity
    trade_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        validation_alias=AliasChoices("trade_id", "id"),
    )

    # When
    date: Date
    time: Time | None = None

    # What
    pair: str = Field(min_length=1)
    direction: Direction

    # Risk (percent gained if the target is hit / lost if the stop is hit)
    target: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    stop_loss: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("stop_loss", "stopLoss"),
    )
    rr: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    sl_pips: float | None = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("sl_pips", "slPips"),
    )
    tp_pips: float | None = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("tp_pips", "tpPips"),
    )

    # How it ended
    outcome: Outcome = Field(validation_alias=AliasChoices("outcome", "result"))

    # Annotations
    emotion: str = ""
    confluences_pro: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("confluences_pro", "confluencesPro"),
    )
    confluences_contro: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("confluences_contro", "confluencesContro"),
    )
    notes: str = ""
    image_urls: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("image_urls", "imageUrls"),
    )

    # ------------------------------------------------------------------ #
    # Boundary coercion                                                    #
    # ------------------------------------------------------------------ #

    @field_validator("trade_id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("direction", "outcome", mode="before")
    @classmethod
    def _normalise_enum_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("time", mode="before")
    @classmethod
    def _blank_time(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("rr", "sl_pips", "tp_pips", mode="before")
    @classmethod
    def _blank_number(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator(
        "target",
        "stop_loss",
        "emotion",
        "notes",
        "confluences_pro",
        "confluences_contro",
        "image_urls",
        mode="before",
    )
    @classmethod
    def _null_to_default(cls, value: Any, info) -> Any:
        if value is None:
            return _NULLABLE_DEFAULTS[info.field_name]
        return value

    @field_validator("confluences_pro", "confluences_contro", "image_urls", mode="before")
    @classmethod
    def _split_joined(cls, value: Any) -> Any:
        # CSV exports join tags with "; "
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(";") if part.strip())
        return value

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, index: int | None = None
    ) -> "TradeRecord":
        """Validate a raw mapping, raising :class:`TradeValidationError`."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in exc.errors()
            )
            raise TradeValidationError(index, problems) from exc

    # ------------------------------------------------------------------ #
    # Derived fields                                                       #
    # ------------------------------------------------------------------ #

    @property
    def sort_key(self) -> tuple[Date, Time]:
        """Chronological key; a missing time sorts as midnight."""
        return (self.date, self.time or MIDNIGHT)

    @property
    def weekday(self) -> int:
        """Day of week with 0=Sunday .. 6=Saturday."""
        return (self.date.weekday() + 1) % 7

    @property
    def hour(self) -> int | None:
        return self.time.hour if self.time is not None else None

    @property
    def month_key(self) -> str:
        return f"{self.date.year:04d}-{self.date.month:02d}"
