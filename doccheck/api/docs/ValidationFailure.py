"""Validation failure record."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ValidationFailure:
    """A non-fatal link problem, attributed to the file it was found in."""

    path: Path
    reason: str
    value: str

    def __str__(self) -> str:
        return f"[{self.path}] {self.reason}: {self.value}"

    def to_dict(self) -> dict[str, str]:
        return {"path": str(self.path), "reason": self.reason, "value": self.value}
