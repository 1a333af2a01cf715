"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any, TypeVar

from ..api.audit.Finding import Finding
from ..api.audit.FindingKind import FindingKind
from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _show_event(display: Display, event: Any) -> None:
    if isinstance(event, Finding):
        if event.kind is FindingKind.EMPTY_VALUE:
            display.warning(event.message)
        elif event.kind is FindingKind.UNUSED:
            display.error(event.message)
        else:
            display.success(event.message)
    else:
        display.info(str(event))


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands must handle all exceptions internally and report failures
    through ``result.success``.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - every event is shown as soon as it is produced
    for event in result.progress_callback(result):
        _show_event(display, event)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output - only for structured display formats
    if display_format != "text":
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
