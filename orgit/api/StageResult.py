"""StageResult dataclass for the announce/progress/result/output command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result of an orgit command.

    ``progress_callback`` is a generator that does the work, yields
    ``(fraction, message)`` tuples and fills in ``result``, ``output``
    and ``success`` on the object passed to it.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def fail(self, message: str, output: dict) -> None:
        """Mark the command as failed, recording ``message`` under ``errors``."""
        output.setdefault("errors", []).append(message)
        output.setdefault("warnings", [])
        self.output = output
        self.result = message
        self.success = False
