"""Custom exception hierarchy for the trading journal."""


class JournalError(Exception):
    """Base exception for all trading journal errors."""


# --- Configuration ---
class ConfigError(JournalError):
    """Invalid or missing configuration."""


# --- Data ---
class DataError(JournalError):
    """Trade data could not be read or accepted."""


class TradeValidationError(DataError):
    """A trade record failed validation at the data-entry boundary."""

    def __init__(self, index: int | None, reason: str):
        self.index = index
        self.reason = reason
        where = f"trade #{index}" if index is not None else "trade"
        super().__init__(f"Invalid {where}: {reason}")


class UnsupportedFormatError(DataError):
    """Trade file has an extension the loader cannot read."""
