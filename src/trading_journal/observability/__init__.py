from .logger import bind_source, get_logger, setup_logging

__all__ = ["bind_source", "get_logger", "setup_logging"]
