"""Centralized logging configuration for txnstats."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Configure logging for a txnstats run.

    Log records go to stderr so stdout carries only the report.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional path to an additional log file
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
        force=True,
    )

    # Driver chatter (heartbeats, pool events) is noise for a one-shot report
    logging.getLogger('pymongo').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"txnstats.{name}")
