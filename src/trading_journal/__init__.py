"""Trading journal analytics engine."""

__version__ = "0.1.0"
