"""Core domain models and configuration."""

from .config import StatuslineConfig
from .models import (
    ModelInfo,
    WorkspaceInfo,
    StatusInput,
    TokenUsage,
    TranscriptMessage,
    TranscriptRecord,
    ContextUsage,
    Segment,
    StatusLine
)
from .exceptions import (
    StatuslineError,
    InputError,
    TranscriptError,
    BranchLookupError
)

__all__ = [
    "StatuslineConfig",
    "ModelInfo",
    "WorkspaceInfo",
    "StatusInput",
    "TokenUsage",
    "TranscriptMessage",
    "TranscriptRecord",
    "ContextUsage",
    "Segment",
    "StatusLine",
    "StatuslineError",
    "InputError",
    "TranscriptError",
    "BranchLookupError"
]
