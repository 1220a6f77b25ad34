"""Core domain models for the statusline formatter."""

import math
import unicodedata
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _object_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _single_line(text: str) -> str:
    return "".join(" " if unicodedata.category(char) == "Cc" else char for char in text)


def _count_or_none(value: Any) -> Optional[int]:
    # bool is an int subclass; JSON true/false is not a token count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value < 0:
        return None
    return int(value)


class ModelInfo(BaseModel):
    """The `model` object of the status document."""
    
    model_config = ConfigDict(extra="ignore")
    
    display_name: Optional[str] = None
    
    @field_validator("display_name", mode="before")
    @classmethod
    def _clean_name(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class WorkspaceInfo(BaseModel):
    """The `workspace` object of the status document."""
    
    model_config = ConfigDict(extra="ignore")
    
    current_dir: Optional[str] = None
    
    @field_validator("current_dir", mode="before")
    @classmethod
    def _clean_dir(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class StatusInput(BaseModel):
    """
    One status document as sent by the host on stdin.
    
    Fields of the wrong shape are treated as absent so a single bad
    optional value never invalidates the whole document.
    """
    
    model_config = ConfigDict(extra="ignore")
    
    model: Optional[ModelInfo] = None
    workspace: Optional[WorkspaceInfo] = None
    transcript_path: Optional[str] = None
    
    @field_validator("model", "workspace", mode="before")
    @classmethod
    def _clean_object(cls, value: Any) -> Any:
        return _object_or_none(value)
    
    @field_validator("transcript_path", mode="before")
    @classmethod
    def _clean_path(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)
    
    @property
    def display_name(self) -> Optional[str]:
        return self.model.display_name if self.model else None
    
    @property
    def current_dir(self) -> Optional[str]:
        return self.workspace.current_dir if self.workspace else None


class TokenUsage(BaseModel):
    """Token counters of a transcript message."""
    
    model_config = ConfigDict(extra="ignore")
    
    input_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None
    
    @field_validator(
        "input_tokens",
        "cache_creation_input_tokens",
        "cache_read_input_tokens",
        mode="before"
    )
    @classmethod
    def _clean_count(cls, value: Any) -> Optional[int]:
        return _count_or_none(value)
    
    @property
    def context_tokens(self) -> int:
        """Tokens occupying the context window; absent counters count as zero."""
        return sum(
            count or 0
            for count in (
                self.input_tokens,
                self.cache_creation_input_tokens,
                self.cache_read_input_tokens,
            )
        )


class TranscriptMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    usage: Optional[TokenUsage] = None
    
    @field_validator("usage", mode="before")
    @classmethod
    def _clean_usage(cls, value: Any) -> Any:
        return _object_or_none(value)


class TranscriptRecord(BaseModel):
    """A single line of a JSONL session transcript."""
    
    model_config = ConfigDict(extra="ignore")
    
    message: Optional[TranscriptMessage] = None
    
    @field_validator("message", mode="before")
    @classmethod
    def _clean_message(cls, value: Any) -> Any:
        return _object_or_none(value)
    
    @property
    def usage(self) -> Optional[TokenUsage]:
        return self.message.usage if self.message else None


@dataclass(frozen=True)
class ContextUsage:
    """Share of the context window consumed by the latest message."""
    
    tokens: int
    window: int
    
    def __post_init__(self):
        """Validate usage on creation."""
        if self.window <= 0:
            raise ValueError(f"Context window must be positive: {self.window}")
    
    @property
    def percent(self) -> int:
        """Percentage rounded half up, computed in integers."""
        return (self.tokens * 200 + self.window) // (2 * self.window)


@dataclass(frozen=True)
class Segment:
    """One rendered piece of the statusline."""
    
    text: str
    icon: Optional[str] = None
    
    def __post_init__(self):
        if not self.text:
            raise ValueError("Segment text cannot be empty")
    
    def render(self) -> str:
        """Render on one line; control characters such as newlines become spaces."""
        text = _single_line(self.text)
        return f"{self.icon} {text}" if self.icon else text


@dataclass
class StatusLine:
    """
    An ordered set of segments.
    
    Head segments are joined by a single space, tail segments are
    appended after the delimiter. Missing segments are simply absent.
    """
    
    head: List[Segment] = field(default_factory=list)
    tail: List[Segment] = field(default_factory=list)
    
    def render(self, delimiter: str = " | ") -> str:
        parts = []
        if self.head:
            parts.append(" ".join(segment.render() for segment in self.head))
        parts.extend(segment.render() for segment in self.tail)
        return delimiter.join(parts)
