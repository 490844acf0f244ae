"""Utility functions for logging."""

from src.map_filter_editor.utils.logger import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
