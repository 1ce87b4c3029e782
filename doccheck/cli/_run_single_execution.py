"""Run command once and display result using the 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from rich.markup import escape

from doccheck.api.validate_output import validate_output

from .display.Display import Display


def _run_single_execution(
    func: Callable[..., Any],
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run command once, display every stage, then exit 0 on success and 1 otherwise."""
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(escape(result.announce))

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {escape(message)} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    for warning in result.output.get("warnings", []):
        display.warning(escape(warning))
    if result.success:
        display.success(escape(result.result))
    else:
        display.error(escape(result.result))

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
