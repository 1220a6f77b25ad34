"""Parser for the status document read from stdin."""

import logging

from pydantic import ValidationError

from ..core import StatusInput
from ..core.exceptions import InputError
from ..utils import loads

logger = logging.getLogger(__name__)


class StatusInputParser:
    """
    Parse the host's JSON status document into a StatusInput.
    
    Only the top-level shape is mandatory: the document must be a JSON
    object. Missing or malformed optional fields degrade to None.
    """
    
    def parse(self, text: str) -> StatusInput:
        """
        Parse raw stdin text.
        
        Args:
            text: Complete contents of standard input
            
        Returns:
            StatusInput with optional fields possibly unset
            
        Raises:
            InputError: If the text is empty, not JSON, or not a JSON object
        """
        if not text or not text.strip():
            raise InputError("empty input")
        
        try:
            data = loads(text)
        except ValueError as e:
            raise InputError(f"not valid JSON ({e})")
        except RecursionError:
            raise InputError("JSON nested too deeply")
        
        if not isinstance(data, dict):
            raise InputError(f"expected a JSON object, got {type(data).__name__}")
        
        try:
            status = StatusInput.model_validate(data)
        except ValidationError as e:
            # Field validators absorb bad shapes of optional fields
            raise InputError(str(e))
        
        logger.debug(
            f"Parsed status input: model={status.display_name!r} "
            f"dir={status.current_dir!r} transcript={status.transcript_path!r}"
        )
        return status
