"""Branch lookup backed by the git command line."""

import logging
import subprocess
from typing import List, Optional, Dict, Any

from .base import BranchResolver
from ..core.exceptions import BranchLookupError

logger = logging.getLogger(__name__)


class GitBranchResolver(BranchResolver):
    """
    Resolve the current branch by shelling out to git.
    
    Two queries are made from the working directory: `rev-parse --git-dir`
    to confirm a repository, then `branch --show-current`, which prints
    nothing on a detached HEAD.
    """
    
    def __init__(self, git_binary: str = "git", timeout: float = 2.0):
        self.git_binary = git_binary
        self.timeout = timeout
    
    def resolve(self, directory: str) -> Optional[str]:
        if not directory:
            return None
        
        try:
            self._run_git(["rev-parse", "--git-dir"], directory)
            branch = self._run_git(["branch", "--show-current"], directory)
        except BranchLookupError as e:
            logger.debug(str(e))
            return None
        
        if not branch:
            logger.debug(f"Detached HEAD in {directory}")
            return None
        return branch
    
    def _run_git(self, args: List[str], directory: str) -> str:
        """
        Run one git command and return its stripped stdout.
        
        Raises:
            BranchLookupError: On a missing binary or directory, timeout or non-zero exit
        """
        try:
            result = subprocess.run(
                [self.git_binary] + args,
                cwd=directory,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError as e:
            raise BranchLookupError(directory, f"{e.filename or self.git_binary} not found")
        except subprocess.TimeoutExpired:
            raise BranchLookupError(directory, f"git {' '.join(args)} timed out after {self.timeout}s")
        except (subprocess.SubprocessError, OSError) as e:
            raise BranchLookupError(directory, str(e))
        
        if result.returncode != 0:
            raise BranchLookupError(
                directory,
                f"git {' '.join(args)} exited with {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout.strip()
    
    def get_resolver_info(self) -> Dict[str, Any]:
        info = super().get_resolver_info()
        info.update({"git_binary": self.git_binary, "timeout": self.timeout})
        return info
