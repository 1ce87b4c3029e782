"""Aggregate per-file outcomes into a pass/fail report."""

from jinja2 import Environment, StrictUndefined

from .FileOutcome import FileOutcome
from .ValidationFailure import ValidationFailure

REPORT_TEMPLATE = """{% if failures %}
{{ failures | length }} link failure(s) in {{ files_checked }} file(s):
{% for failure in failures %}
  {{ failure }}
{% endfor %}
{% elif not errors %}
All {{ links_checked }} link(s) in {{ files_checked }} file(s) passed.
{% endif %}
{% for error in errors %}
Fatal: {{ error }}
{% endfor %}
"""

_REPORT = Environment(trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined).from_string(REPORT_TEMPLATE)


class Reporter:
    """Collect outcomes in walk order. A run passes with zero failures and zero errors."""

    def __init__(self) -> None:
        self.outcomes: list[FileOutcome] = []
        self.errors: list[str] = []

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    def fatal(self, error: Exception) -> None:
        self.errors.append(str(error))

    @property
    def failures(self) -> list[ValidationFailure]:
        return [failure for outcome in self.outcomes for failure in outcome.failures]

    @property
    def files_checked(self) -> list[str]:
        return [str(outcome.path) for outcome in self.outcomes]

    @property
    def links_checked(self) -> int:
        return sum(outcome.links_checked for outcome in self.outcomes)

    @property
    def passed(self) -> bool:
        return not self.errors and not self.failures

    def messages(self) -> list[str]:
        """Failure messages in the form ``[<path>] <reason>: <value>``."""
        return [str(failure) for failure in self.failures]

    def render(self) -> str:
        """Plain-text report of the run."""
        return _REPORT.render(
            failures=self.messages(),
            files_checked=len(self.outcomes),
            links_checked=self.links_checked,
            errors=self.errors,
        ).rstrip("\n")
