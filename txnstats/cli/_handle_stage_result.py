"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F, display_format: str = "json") -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
