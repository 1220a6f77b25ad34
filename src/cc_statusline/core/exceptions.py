"""Custom exception hierarchy for the statusline formatter."""

from typing import Optional


class StatuslineError(Exception):
    """Base exception for all statusline errors."""
    
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}


class InputError(StatuslineError):
    """Raised when the status document on stdin cannot be used at all."""
    
    def __init__(self, reason: str):
        super().__init__(f"Invalid status input: {reason}")
        self.reason = reason


class TranscriptError(StatuslineError):
    """Raised when the transcript cannot yield a usage record."""
    
    def __init__(self, file_path: str, reason: str = ""):
        message = f"Failed to read transcript {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class BranchLookupError(StatuslineError):
    """Raised when the version-control binary cannot answer a query."""
    
    def __init__(self, directory: str, reason: str):
        super().__init__(f"Branch lookup failed for {directory}: {reason}")
        self.directory = directory
        self.reason = reason
