"""Branch resolvers for the git segment."""

from .base import BranchResolver, NullBranchResolver, StaticBranchResolver
from .git_resolver import GitBranchResolver

__all__ = [
    "BranchResolver",
    "NullBranchResolver",
    "StaticBranchResolver",
    "GitBranchResolver"
]
