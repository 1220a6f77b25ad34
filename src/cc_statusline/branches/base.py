"""Abstract base class for branch resolvers."""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class BranchResolver(ABC):
    """
    Abstract interface for looking up the checked-out branch.
    
    Implementations never raise: any failure means "no branch".
    """
    
    @abstractmethod
    def resolve(self, directory: str) -> Optional[str]:
        """
        Find the branch checked out in the repository containing a directory.
        
        Args:
            directory: Working directory, possibly nested inside a repository
            
        Returns:
            Branch name, or None outside a repository or on a detached HEAD
        """
        pass
    
    def get_resolver_info(self) -> Dict[str, Any]:
        """
        Get information about this resolver.
        
        Returns:
            Dictionary with resolver metadata
        """
        return {"resolver": self.__class__.__name__}


class NullBranchResolver(BranchResolver):
    """Resolver used when branch display is disabled."""
    
    def resolve(self, directory: str) -> Optional[str]:
        return None


class StaticBranchResolver(BranchResolver):
    """Resolver returning a fixed answer, regardless of the directory."""
    
    def __init__(self, branch: Optional[str]):
        self.branch = branch or None
    
    def resolve(self, directory: str) -> Optional[str]:
        return self.branch
    
    def get_resolver_info(self) -> Dict[str, Any]:
        info = super().get_resolver_info()
        info["branch"] = self.branch
        return info
