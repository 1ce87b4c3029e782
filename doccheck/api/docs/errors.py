"""Traversal-fatal errors.

Validation failures are returned as ValidationFailure values; only the errors
below abort a documentation check.
"""


class DocCheckError(Exception):
    """Base class for errors that abort the whole documentation check."""


class GlobPatternError(DocCheckError, ValueError):
    """An ignore pattern is not a valid glob."""

    def __init__(self, pattern: str, problem: str):
        self.pattern = pattern
        self.problem = problem
        super().__init__(f"Invalid glob pattern {pattern!r}: {problem}")


class DocReadError(DocCheckError, OSError):
    """An eligible markdown file could not be read."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")
