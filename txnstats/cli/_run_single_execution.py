"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import Any

import typer

from txnstats.api.validate_output import validate_output


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
) -> None:
    """Run command once and display result.

    Stage 1 (Announce) must happen IMMEDIATELY before any work starts.
    Only a successful run prints its report on stdout; a failed run prints
    nothing there so no partial report can be mistaken for a real one.

    Raises:
        typer.Exit: Always, with 0 on success and 1 on failure
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"[dim]Progress:[/dim] {message} ({progress_percent:.0%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result.success:
        display.json_output(result.output["report"], format=display_format)

    raise typer.Exit(0 if result.success else 1)
