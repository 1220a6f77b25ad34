"""Centralized logging configuration."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration.
    
    Stdout carries the statusline itself, so console output goes to stderr.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        format_string: Optional custom format string
        
    Returns:
        Configured root logger
    """
    if not format_string:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper()))
    
    # Repeated calls in one process must not stack handlers
    for handler in list(logger.handlers):
        if getattr(handler, "_cc_statusline", False):
            logger.removeHandler(handler)
            handler.close()
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(format_string))
    console_handler._cc_statusline = True
    logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(format_string))
        file_handler._cc_statusline = True
        logger.addHandler(file_handler)
    
    return logger
