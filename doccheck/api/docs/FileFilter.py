"""Decide which filesystem entries are checked as documentation."""

import fnmatch
from collections.abc import Iterable
from enum import Enum

from ._validate_glob import _validate_glob


class FilterDecision(Enum):
    """What the walker should do with one entry."""

    SKIP_FILE = "skip-file"
    SKIP_DIR = "skip-directory"
    PROCEED = "proceed"
    CHECK = "check"


class FileFilter:
    """Match entry names against ignore globs and the markdown glob.

    Matching is done on the entry name only and is case-sensitive.
    """

    def __init__(self, ignore: Iterable[str], markdown_glob: str = "*.md"):
        self.ignore = tuple(ignore)
        self.markdown_glob = markdown_glob
        # A bad pattern is a configuration error: fail before any walking
        for pattern in (*self.ignore, self.markdown_glob):
            _validate_glob(pattern)

    def should_skip(self, name: str, is_dir: bool) -> FilterDecision:
        """Return SKIP_DIR / SKIP_FILE on the first matching ignore pattern, else PROCEED."""
        for pattern in self.ignore:
            if fnmatch.fnmatchcase(name, pattern):
                return FilterDecision.SKIP_DIR if is_dir else FilterDecision.SKIP_FILE
        return FilterDecision.PROCEED

    def is_eligible(self, name: str) -> bool:
        return fnmatch.fnmatchcase(name, self.markdown_glob)

    def decide(self, name: str, is_dir: bool) -> FilterDecision:
        """Full decision for one entry.

        Directories that are not ignored PROCEED (descend, but are not
        documents). Files that are not ignored are CHECKed when they match the
        markdown glob and skipped otherwise.
        """
        decision = self.should_skip(name, is_dir)
        if decision is not FilterDecision.PROCEED or is_dir:
            return decision
        return FilterDecision.CHECK if self.is_eligible(name) else FilterDecision.SKIP_FILE
