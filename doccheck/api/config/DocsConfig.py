"""Compiled-in documentation check configuration."""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Files and directory patterns to ignore.
DEFAULT_IGNORE: tuple[str, ...] = (
    "Godeps",
    ".[!.]*",  # hidden files and directories
)

# Expectations for where titled line-anchor links should point to.
DEFAULT_LINE_EXPECTATIONS: Mapping[str, str] = MappingProxyType(
    {
        "ContainerInfo struct": "type ContainerInfo struct {",
        "MachineInfo struct in the source": "type MachineInfo struct {",
    }
)


class DocsConfig(BaseModel):
    """Read-only configuration shared by the filter, walker and validator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field("docs", description="Directory (or single markdown file) to crawl")
    ignore: tuple[str, ...] = Field(DEFAULT_IGNORE, description="Glob patterns of entry names to skip")
    markdown_glob: str = Field("*.md", description="Glob an entry name must match to be checked")
    hosting_domain: str = Field("github.com", description="Host serving the project's repository")
    repo_prefix: str = Field("/google/cadvisor", description="Path prefix of the project's own repository")
    line_expectations: Mapping[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_LINE_EXPECTATIONS),
        validate_default=True,
        description="Line-anchor link title -> literal source text expected at that line",
    )
    source_root: Path | None = Field(
        None,
        description="Checkout used to compare line anchors against live source; comparison is off when unset",
    )

    @field_validator("line_expectations")
    @classmethod
    def _freeze_line_expectations(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        # frozen=True only guards attribute assignment
        return MappingProxyType(dict(v))

    @classmethod
    def default(cls, **overrides: Any) -> "DocsConfig":
        """Return the compiled-in configuration, optionally with some fields replaced.

        Raises:
            ValueError: If an override does not validate
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            first = (e.errors() or [{"msg": str(e), "loc": ()}])[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
