"""
Logging configuration and utilities for the reading package.
"""
from .config import configure_logging, get_logger, get_navigator_logger, log_cursor_move

__all__ = ["configure_logging", "get_logger", "get_navigator_logger", "log_cursor_move"]
