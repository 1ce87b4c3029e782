"""Soundness rules for a single markdown link."""

import re
from pathlib import Path
from urllib.parse import SplitResult, unquote

from ...logging_config import get_logger
from ..config.DocsConfig import DocsConfig
from ._parse_url import _parse_url
from ._read_source_line import _read_source_line
from .Link import Link
from .ValidationFailure import ValidationFailure

logger = get_logger("docs.validator")

# GitHub line anchors: #L42, and L42 among &-separated fragment parts
LINE_ANCHOR_PATTERN = re.compile(r"^(?:.*&)?L([0-9]+)(?:&.*)?$")

REASON_MALFORMED = "malformed URL"
REASON_SHOULD_BE_RELATIVE = "should be relative"
REASON_NEEDS_TITLE = "github line links must have a descriptive title"
REASON_NO_EXPECTATION = "no expectation registered for this title"
REASON_BAD_LINE = "invalid line number"
REASON_UNREADABLE_SOURCE = "cannot read anchored source"
REASON_PAST_EOF = "line anchor past end of file"
REASON_MISMATCH = "line anchor does not match expectation"


class LinkValidator:
    """Check links against the relative-link and line-anchor rules.

    The validator keeps no per-link state, so one instance serves a whole run.
    """

    def __init__(self, config: DocsConfig):
        self.config = config

    def check_link(self, path: Path, text: str, title: str, href: str) -> list[ValidationFailure]:
        """Check one link found in ``path``; an empty list means the link is fine."""
        return self.check(path, Link(href=href, title=title, content=text))

    def check(self, path: Path, link: Link) -> list[ValidationFailure]:
        href = link.href
        title = link.title
        failures: list[ValidationFailure] = []

        def fail(reason: str, value: str = href) -> list[ValidationFailure]:
            failures.append(ValidationFailure(path, reason, value))
            return failures

        try:
            url = _parse_url(href)
        except ValueError as exc:
            return fail(REASON_MALFORMED, f"{href} ({exc})")

        if url.scheme:
            host = (url.hostname or "").lower()
            if host != self.config.hosting_domain.lower():
                logger.debug("[%s] not %s: %r", path, self.config.hosting_domain, host)
                return failures
            if not url.path.startswith(self.config.repo_prefix):
                logger.debug("[%s] external %s link: %r", path, host, href)
                return failures
            # Links into this repository go stale when it moves
            fail(REASON_SHOULD_BE_RELATIVE)

        fragment = unquote(url.fragment)
        match = LINE_ANCHOR_PATTERN.match(fragment)
        if match is None:
            logger.debug("[%s] no match: %r", path, fragment)
            return failures

        if not title:
            return fail(REASON_NEEDS_TITLE)
        expect = self.config.line_expectations.get(title)
        if expect is None:
            return fail(REASON_NO_EXPECTATION, f"{title!r} ({href})")
        try:
            line_number = int(match.group(1))
        except ValueError as exc:
            return fail(REASON_BAD_LINE, f"{href} ({exc})")

        if self.config.source_root is not None:
            self._compare_source(path, url, self.config.source_root, expect, line_number, fail)
        return failures

    def _compare_source(
        self, path: Path, url: SplitResult, source_root: Path, expect: str, line_number: int, fail
    ) -> None:
        """Compare the anchored source line with the registered expectation."""
        target = self._anchored_source(path, url, source_root)
        if target is None:
            logger.debug("[%s] cannot locate anchored source for %r", path, url.geturl())
            return
        try:
            line = _read_source_line(target, line_number)
        except OSError as exc:
            fail(REASON_UNREADABLE_SOURCE, f"{target} ({exc})")
            return
        if line is None:
            fail(REASON_PAST_EOF, f"{target}:{line_number}")
        elif expect not in line:
            fail(REASON_MISMATCH, f"{target}:{line_number}: expected {expect!r}, found {line.strip()!r}")

    def _anchored_source(self, path: Path, url: SplitResult, source_root: Path) -> Path | None:
        """Map a link to the local file it anchors into, or None if it cannot be mapped."""
        link_path = unquote(url.path)

        if url.scheme:
            # /<owner>/<repo>/blob/<ref>/<file>
            rest = link_path[len(self.config.repo_prefix) :].lstrip("/")
            parts = rest.split("/", 2)
            if len(parts) == 3 and parts[0] in ("blob", "tree") and parts[2]:
                return source_root / parts[2]
            return None
        if not link_path:
            return path
        if link_path.startswith("/"):
            return source_root / link_path.lstrip("/")
        return path.parent / link_path
