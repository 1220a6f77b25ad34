"""Processors turning raw inputs into statusline values."""

from .input_parser import StatusInputParser
from .path_formatter import abbreviate_path
from .transcript_reader import TranscriptReader

__all__ = [
    "StatusInputParser",
    "abbreviate_path",
    "TranscriptReader"
]
