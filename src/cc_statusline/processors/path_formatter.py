"""Working directory abbreviation."""

from pathlib import PurePath
from typing import Optional


def abbreviate_path(path: Optional[str]) -> Optional[str]:
    """
    Keep only the last two components of a path.
    
    "/home/user/projects/myrepo" -> "projects/myrepo", "/c" -> "c",
    "/" -> "/". Returns None for a missing path.
    """
    if not path:
        return None
    
    pure = PurePath(path)
    names = [part for part in pure.parts if part != pure.anchor]
    if not names:
        return pure.anchor or None
    return "/".join(names[-2:])
