"""Immutable configuration with validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import math
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class StatuslineConfig:
    """
    Immutable configuration for the statusline formatter.
    
    All validation happens in __post_init__ so a config object
    is always in a valid state.
    """
    
    # Context usage
    context_window_tokens: int = field(default=200_000)
    show_context_usage: bool = field(default=True)
    
    # Git settings
    show_git_branch: bool = field(default=True)
    git_binary: str = field(default="git")
    git_timeout_seconds: float = field(default=2.0)
    
    # Rendering
    delimiter: str = field(default=" | ")
    
    # Operational settings
    log_level: str = field(default="WARNING")
    log_file: Optional[str] = field(default=None)
    
    def __post_init__(self):
        """Validate configuration on initialization."""
        if isinstance(self.context_window_tokens, bool) or not isinstance(self.context_window_tokens, int):
            raise ValueError(
                f"context_window_tokens must be an integer, got {self.context_window_tokens!r}"
            )
        
        if self.context_window_tokens <= 0:
            raise ValueError(
                f"context_window_tokens must be positive, got {self.context_window_tokens}"
            )
        
        if not self.git_binary:
            raise ValueError("git_binary cannot be empty")
        
        if not math.isfinite(self.git_timeout_seconds) or self.git_timeout_seconds <= 0:
            raise ValueError(
                f"git_timeout_seconds must be positive, got {self.git_timeout_seconds}"
            )
        
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}, got {self.log_level}")
    
    @property
    def log_file_path(self) -> Optional[Path]:
        """Get expanded log file path, if one is configured."""
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()
    
    @classmethod
    def from_env(cls) -> "StatuslineConfig":
        """Create configuration from environment variables."""
        return cls(
            context_window_tokens=int(os.getenv("STATUSLINE_CONTEXT_WINDOW", "200000")),
            show_context_usage=_env_flag("STATUSLINE_SHOW_CONTEXT", "true"),
            show_git_branch=_env_flag("STATUSLINE_SHOW_GIT", "true"),
            git_binary=os.getenv("STATUSLINE_GIT_BINARY", "git"),
            git_timeout_seconds=float(os.getenv("STATUSLINE_GIT_TIMEOUT", "2.0")),
            delimiter=os.getenv("STATUSLINE_DELIMITER", " | "),
            log_level=os.getenv("STATUSLINE_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("STATUSLINE_LOG_FILE") or None
        )
    
    @classmethod
    def from_dict(cls, config_dict: dict) -> "StatuslineConfig":
        """Create configuration from dictionary."""
        # Filter out any unknown keys
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered_dict)
