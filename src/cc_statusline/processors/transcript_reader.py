"""Context usage from the tail of a JSONL transcript."""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ..core import ContextUsage, TranscriptRecord
from ..core.exceptions import TranscriptError
from ..utils import loads

logger = logging.getLogger(__name__)


class TranscriptReader:
    """
    Derive context window usage from a session transcript.
    
    Only the final record matters. The file is streamed line by line
    so large transcripts are never held in memory.
    """
    
    def __init__(self, context_window_tokens: int = 200_000):
        if context_window_tokens <= 0:
            raise ValueError(
                f"context_window_tokens must be positive, got {context_window_tokens}"
            )
        self.context_window_tokens = context_window_tokens
    
    def read_usage(self, transcript_path: Optional[Union[str, Path]]) -> Optional[ContextUsage]:
        """
        Compute usage for the last transcript record.
        
        Returns:
            ContextUsage, or None when the transcript has nothing usable
        """
        if not transcript_path:
            return None
        
        try:
            record = self.read_last_record(Path(transcript_path).expanduser())
        except TranscriptError as e:
            logger.debug(str(e))
            return None
        
        usage = record.usage
        if usage is None:
            logger.debug(f"No message.usage in last record of {transcript_path}")
            return None
        
        return ContextUsage(tokens=usage.context_tokens, window=self.context_window_tokens)
    
    def read_last_record(self, file_path: Path) -> TranscriptRecord:
        """
        Parse the last non-blank line of a transcript.
        
        Raises:
            TranscriptError: If the file is missing, empty or the line is not a JSON object
        """
        last_line = self._last_line(file_path)
        if last_line is None:
            raise TranscriptError(str(file_path), reason="Transcript is empty")
        
        try:
            data = loads(last_line)
        except ValueError as e:
            raise TranscriptError(str(file_path), reason=f"Invalid JSON in last line: {e}")
        except RecursionError:
            raise TranscriptError(str(file_path), reason="Last line nested too deeply")
        
        if not isinstance(data, dict):
            raise TranscriptError(str(file_path), reason="Last line is not a JSON object")
        
        try:
            return TranscriptRecord.model_validate(data)
        except ValidationError as e:
            raise TranscriptError(str(file_path), reason=str(e))
    
    def _last_line(self, file_path: Path) -> Optional[str]:
        last = None
        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                for line in f:
                    line = line.strip()
                    if line:
                        last = line
        except FileNotFoundError:
            raise TranscriptError(str(file_path), reason="File not found")
        except OSError as e:
            raise TranscriptError(str(file_path), reason=str(e))
        return last
