"""Utility functions for the statusline formatter."""

from .logger import setup_logging
from .json_decode import loads

__all__ = [
    "setup_logging",
    "loads"
]
