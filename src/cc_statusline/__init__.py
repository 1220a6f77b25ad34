"""
cc-statusline
=============

A single-shot statusline formatter for editor and agent hosts: one JSON
status document in on stdin, one line of text out on stdout.

License: MIT
"""

__version__ = "1.0.0"

from .core.config import StatuslineConfig
from .core.models import StatusInput, ContextUsage, StatusLine
from .main import StatuslineFormatter, StatuslineContainer, create_formatter

__all__ = [
    "StatuslineConfig",
    "StatusInput",
    "ContextUsage",
    "StatusLine",
    "StatuslineFormatter",
    "StatuslineContainer",
    "create_formatter"
]
