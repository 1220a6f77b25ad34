"""Statusline formatter and CLI with dependency injection."""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO, TypeVar

from dependency_injector import containers, providers
from dotenv import load_dotenv

from . import __version__
from .core import StatuslineConfig, StatusInput, Segment, StatusLine
from .core.exceptions import InputError
from .branches import BranchResolver, GitBranchResolver, NullBranchResolver
from .processors import StatusInputParser, TranscriptReader, abbreviate_path
from .utils import setup_logging

logger = logging.getLogger(__name__)

FOLDER_ICON = "📁"
BRANCH_ICON = "🌿"
USAGE_ICON = "📊"

T = TypeVar("T")


class StatuslineFormatter:
    """
    Build one statusline from one status document.
    
    Every data source is consulted at most once. Optional sources that
    fail or have nothing to say drop their segment, delimiter included.
    """
    
    def __init__(
        self,
        config: StatuslineConfig,
        branch_resolver: BranchResolver,
        transcript_reader: TranscriptReader
    ):
        self.config = config
        self.branch_resolver = branch_resolver
        self.transcript_reader = transcript_reader
    
    def format(self, status: StatusInput) -> str:
        """Render the statusline text, without a trailing newline."""
        return self.build(status).render(self.config.delimiter)
    
    def build(self, status: StatusInput) -> StatusLine:
        line = StatusLine()
        
        model = self._model_segment(status)
        if model:
            line.head.append(model)
        
        path = self._path_segment(status)
        if path:
            line.head.append(path)
        
        branch = self._optional("branch", lambda: self._branch_segment(status))
        if branch:
            line.tail.append(branch)
        
        usage = self._optional("context usage", lambda: self._usage_segment(status))
        if usage:
            line.tail.append(usage)
        
        return line
    
    def _model_segment(self, status: StatusInput) -> Optional[Segment]:
        name = status.display_name
        return Segment(f"[{name}]") if name else None
    
    def _path_segment(self, status: StatusInput) -> Optional[Segment]:
        short = abbreviate_path(status.current_dir)
        return Segment(short, icon=FOLDER_ICON) if short else None
    
    def _branch_segment(self, status: StatusInput) -> Optional[Segment]:
        if not status.current_dir:
            return None
        branch = self.branch_resolver.resolve(status.current_dir)
        return Segment(branch, icon=BRANCH_ICON) if branch else None
    
    def _usage_segment(self, status: StatusInput) -> Optional[Segment]:
        if not self.config.show_context_usage:
            return None
        usage = self.transcript_reader.read_usage(status.transcript_path)
        return Segment(f"{usage.percent}%", icon=USAGE_ICON) if usage else None
    
    def _optional(self, name: str, build: Callable[[], Optional[T]]) -> Optional[T]:
        try:
            return build()
        except Exception as e:
            logger.warning(f"Omitting {name} segment: {e}")
            return None


def get_branch_resolver(config_obj: StatuslineConfig) -> BranchResolver:
    """Select the branch resolver based on config."""
    if not config_obj.show_git_branch:
        return NullBranchResolver()
    return GitBranchResolver(
        git_binary=config_obj.git_binary,
        timeout=config_obj.git_timeout_seconds
    )


class StatuslineContainer(containers.DeclarativeContainer):
    """Dependency injection container using dependency-injector library."""
    
    config = providers.Singleton(StatuslineConfig.from_env)
    
    logger_setup = providers.Resource(
        setup_logging,
        level=config.provided.log_level,
        log_file=config.provided.log_file
    )
    
    input_parser = providers.Singleton(StatusInputParser)
    
    branch_resolver = providers.Singleton(
        get_branch_resolver,
        config_obj=config
    )
    
    transcript_reader = providers.Singleton(
        TranscriptReader,
        context_window_tokens=config.provided.context_window_tokens
    )
    
    formatter = providers.Factory(
        StatuslineFormatter,
        config=config,
        branch_resolver=branch_resolver,
        transcript_reader=transcript_reader
    )


def create_formatter(
    config: Optional[StatuslineConfig] = None,
    branch_resolver: Optional[BranchResolver] = None
) -> StatuslineFormatter:
    """
    Factory function to create a configured formatter.
    
    Args:
        config: Optional configuration, uses environment if not provided
        branch_resolver: Optional resolver replacing the git lookup
        
    Returns:
        Configured StatuslineFormatter instance
    """
    container = StatuslineContainer()
    
    if config:
        container.config.override(config)
    if branch_resolver:
        container.branch_resolver.override(branch_resolver)
    
    return container.formatter()


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cc-statusline",
        description="Format a one-line editor statusline from a JSON document on stdin"
    )
    parser.add_argument("--context-window", type=int, help="Token budget used for the usage percentage")
    parser.add_argument("--no-context", action="store_true", help="Omit the context usage segment")
    parser.add_argument("--no-git", action="store_true", help="Omit the git branch segment")
    parser.add_argument("--log-level", help="Logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config(args: argparse.Namespace) -> StatuslineConfig:
    """Environment configuration with CLI overrides; falls back to defaults when invalid."""
    try:
        config = StatuslineConfig.from_env()
    except ValueError as e:
        logger.warning(f"Ignoring invalid environment configuration: {e}")
        config = StatuslineConfig()
    
    config_dict = {}
    if args.context_window is not None:
        config_dict["context_window_tokens"] = args.context_window
    if args.no_context:
        config_dict["show_context_usage"] = False
    if args.no_git:
        config_dict["show_git_branch"] = False
    if args.log_level:
        config_dict["log_level"] = args.log_level
    
    if config_dict:
        try:
            config = StatuslineConfig.from_dict({**config.__dict__, **config_dict})
        except ValueError as e:
            logger.warning(f"Ignoring invalid command line options: {e}")
    return config


def _utf8(stream: TextIO) -> TextIO:
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8", errors="replace")
    return stream


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    """Main entry point for CLI execution."""
    args = _build_arg_parser().parse_args(argv)
    
    load_dotenv()
    config = _load_config(args)
    
    container = StatuslineContainer()
    container.config.override(config)
    try:
        container.init_resources()
    except OSError as e:
        setup_logging(config.log_level)
        logger.warning(f"Log file unavailable, logging to stderr only: {e}")
    
    stdin = stdin if stdin is not None else _utf8(sys.stdin)
    stdout = stdout if stdout is not None else _utf8(sys.stdout)
    
    try:
        status = container.input_parser().parse(stdin.read())
    except InputError as e:
        logger.error(str(e))
        return 1
    
    line = container.formatter().format(status)
    stdout.write(line + "\n")
    stdout.flush()
    return 0
