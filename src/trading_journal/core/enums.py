"""Enumerations used across the trading journal."""

from enum import Enum


class Direction(str, Enum):
    LONG = "long"
    SHORT = "short"


class Outcome(str, Enum):
    """How a logged trade ended.

    The Italian values are the ones the journal has always stored and
    are kept verbatim so existing exports keep loading.
    """

    TARGET = "target"
    STOP_LOSS = "stop_loss"
    BREAKEVEN = "breakeven"
    PARTIAL = "parziale"
    UNFILLED = "non_fillato"


class Classification(str, Enum):
    """Win / loss / neutral bucket an outcome falls into."""

    WIN = "win"
    LOSS = "loss"
    NEUTRAL = "none"


class ConfluenceSide(str, Enum):
    PRO = "pro"
    CONTRO = "contro"
    BOTH = "both"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"
