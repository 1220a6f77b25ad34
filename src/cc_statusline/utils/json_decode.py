"""JSON decoding shared by the stdin and transcript parsers."""

import json
from typing import Any


def _parse_int(digits: str) -> Any:
    # int() refuses very long digit strings; such values only matter as "not a usable count"
    try:
        return int(digits)
    except ValueError:
        return float(digits)


def loads(text: str) -> Any:
    """
    Decode a JSON document.
    
    Integers beyond the interpreter's digit limit decode as floats
    (infinity for the truly huge) instead of failing the document.
    
    Raises:
        ValueError: If the text is not valid JSON
        RecursionError: If nesting exceeds the interpreter's recursion limit
    """
    return json.loads(text, parse_int=_parse_int)
