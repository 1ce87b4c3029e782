"""Per-file walk outcome."""

from dataclasses import dataclass, field
from pathlib import Path

from .ValidationFailure import ValidationFailure


@dataclass
class FileOutcome:
    """Result of checking one eligible markdown file."""

    path: Path
    links_checked: int = 0
    failures: list[ValidationFailure] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures
