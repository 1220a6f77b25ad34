#!/usr/bin/env python3
"""
Tests for branch resolvers, including a real git fixture repository.
"""

import shutil
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src directory to path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from cc_statusline.branches import GitBranchResolver, NullBranchResolver, StaticBranchResolver

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(directory: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=directory,
        check=True,
        capture_output=True
    )


def make_repo(directory: Path, branch: str) -> Path:
    """Create a repository whose HEAD points at the given branch."""
    directory.mkdir(parents=True, exist_ok=True)
    git(directory, "init", "-q")
    git(directory, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    return directory


@pytest.fixture(autouse=True)
def isolated_git(tmp_path, monkeypatch):
    """Stop git discovery at tmp_path and ignore any repository env from the caller."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for name in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
        monkeypatch.delenv(name, raising=False)


class TestGitBranchResolver:
    """Test suite for GitBranchResolver"""

    @pytest.fixture
    def resolver(self):
        return GitBranchResolver()

    @requires_git
    def test_branch_main(self, resolver, tmp_path):
        repo = make_repo(tmp_path / "repo", "main")
        assert resolver.resolve(str(repo)) == "main"

    @requires_git
    def test_branch_from_nested_directory(self, resolver, tmp_path):
        repo = make_repo(tmp_path / "repo", "feature-x")
        nested = repo / "src" / "pkg"
        nested.mkdir(parents=True)
        assert resolver.resolve(str(nested)) == "feature-x"

    @requires_git
    def test_plain_directory(self, resolver, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()
        assert resolver.resolve(str(plain)) is None

    @requires_git
    def test_detached_head(self, resolver, tmp_path):
        repo = make_repo(tmp_path / "repo", "main")
        git(repo, "commit", "--allow-empty", "-q", "-m", "initial")
        git(repo, "checkout", "-q", "--detach")
        assert resolver.resolve(str(repo)) is None

    def test_missing_directory(self, resolver, tmp_path):
        assert resolver.resolve(str(tmp_path / "does-not-exist")) is None

    def test_empty_directory_argument(self, resolver):
        assert resolver.resolve("") is None

    def test_missing_binary(self, tmp_path):
        resolver = GitBranchResolver(git_binary="definitely-not-a-git-binary")
        assert resolver.resolve(str(tmp_path)) is None

    def test_timeout(self, resolver, tmp_path):
        with patch("cc_statusline.branches.git_resolver.subprocess.run") as run:
            run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=2.0)
            assert resolver.resolve(str(tmp_path)) is None
        assert run.call_count == 1

    def test_non_zero_exit(self, resolver, tmp_path):
        failed = subprocess.CompletedProcess(args=["git"], returncode=128, stdout="", stderr="fatal")
        with patch("cc_statusline.branches.git_resolver.subprocess.run", return_value=failed):
            assert resolver.resolve(str(tmp_path)) is None

    def test_queries_run_in_working_directory(self, resolver, tmp_path):
        results = [
            subprocess.CompletedProcess(args=[], returncode=0, stdout=".git\n", stderr=""),
            subprocess.CompletedProcess(args=[], returncode=0, stdout="develop\n", stderr=""),
        ]
        with patch("cc_statusline.branches.git_resolver.subprocess.run", side_effect=results) as run:
            assert resolver.resolve(str(tmp_path)) == "develop"
        commands = [call.args[0] for call in run.call_args_list]
        assert commands == [["git", "rev-parse", "--git-dir"], ["git", "branch", "--show-current"]]
        assert all(call.kwargs["cwd"] == str(tmp_path) for call in run.call_args_list)

    def test_resolver_info(self):
        info = GitBranchResolver(git_binary="/usr/bin/git", timeout=1.5).get_resolver_info()
        assert info == {"resolver": "GitBranchResolver", "git_binary": "/usr/bin/git", "timeout": 1.5}


class TestSimpleResolvers:
    """Test suite for the non-git resolvers"""

    def test_null_resolver(self, tmp_path):
        assert NullBranchResolver().resolve(str(tmp_path)) is None

    def test_static_resolver(self):
        resolver = StaticBranchResolver("main")
        assert resolver.resolve("/a/b") == "main"
        assert resolver.resolve("/elsewhere") == "main"
        assert resolver.get_resolver_info() == {"resolver": "StaticBranchResolver", "branch": "main"}

    def test_static_resolver_empty_branch(self):
        assert StaticBranchResolver("").resolve("/a/b") is None
