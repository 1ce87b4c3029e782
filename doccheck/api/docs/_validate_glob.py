"""Validation for glob patterns used to skip entries."""

from .errors import GlobPatternError


def _validate_glob(pattern: str) -> None:
    """Raise GlobPatternError when ``pattern`` is not a well-formed glob.

    ``fnmatch`` quietly treats a broken character class as literal text, so
    the checks are done here: no empty pattern and every ``[`` closed.
    """
    if not pattern:
        raise GlobPatternError(pattern, "pattern cannot be empty")

    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        # A ']' right after the opening bracket is a literal member
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            raise GlobPatternError(pattern, "unterminated character class")
        i = j + 1
