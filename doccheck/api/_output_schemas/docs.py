"""Output schemas for docs commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import schema_registry


class FailureRecord(BaseModel):
    """One validation failure, attributed to the file it was found in."""

    path: str = Field(..., description="Markdown file containing the link")
    reason: str = Field(..., description="Why the link failed validation")
    value: str = Field(..., description="Offending value (usually the href)")


class DocsCheckOutput(BaseOutputSchema):
    """Output schema for the docs check command.

    Output structure:
    - errors: list[str] - fatal errors that aborted the walk, empty list if none
    - warnings: list[str] - warning messages, empty list if none
    - root: str - path that was crawled
    - passed: bool - True only with zero failures and zero errors
    - files_checked: list[str] - markdown files checked, in walk order
    - links_checked: int - explicit links handed to the validator
    - failures: list[FailureRecord] - accumulated validation failures, in walk order
    """

    root: str = Field(..., description="Path that was crawled")
    passed: bool = Field(..., description="True only with zero failures and zero errors")
    files_checked: list[str] = Field(..., description="Markdown files checked, in walk order")
    links_checked: int = Field(..., description="Number of explicit links validated")
    failures: list[FailureRecord] = Field(..., description="Validation failures, in walk order")


schema_registry.register_output_schema("docs", "check", DocsCheckOutput)
