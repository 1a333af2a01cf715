"""StageResult dataclass for the announce/progress/result/output command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    The command returns immediately with ``announce`` set. The work happens in
    ``progress_callback``, a generator that yields report events and fills in
    ``result``, ``output`` and ``success`` before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[Any]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
