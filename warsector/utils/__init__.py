"""Utility components for warsector."""

from warsector.utils.logging import setup_logging, get_logger
from warsector.utils.color import parse_color

__all__ = [
    "setup_logging",
    "get_logger",
    "parse_color",
]
