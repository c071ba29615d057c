"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import TypeVar

import typer

from ..api.StageResult import StageResult
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable[..., StageResult])


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the root callback in the context chain.

    Falls back to yaml when no context carries one.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML, or via ``result_printer``)

    The wrapped function exits with 0 on success and 1 on failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        display_format = _extract_display_format(ctx)

        result = func(*args, **kwargs)
        display.status(result.announce)

        for progress_percent, message in result.progress_callback(result):
            display.progress(message, progress_percent)

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")
        if not result.output:
            raise ValueError("progress_callback must set result.output to a non-empty dict")

        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        if result_printer and result.success:
            result_printer(result.output)
        else:
            display.json_output(result.output, format=display_format)

        sys.exit(0 if result.success else 1)

    return wrapper  # type: ignore[return-value]
