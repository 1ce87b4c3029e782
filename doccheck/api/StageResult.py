"""StageResult dataclass for the announce/progress/result/output command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result returned by every ``cmd_*`` function.

    ``progress_callback`` is a generator that yields ``(fraction, message)``
    pairs while it does the work, and fills ``result``, ``output`` and
    ``success`` before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def drain(self) -> "StageResult":
        """Run the progress callback to completion without displaying anything."""
        for _ in self.progress_callback(self):
            pass
        return self
