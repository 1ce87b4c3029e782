"""Markdown renderer that validates links instead of producing output."""

# The visitor has a ``list`` handler; keep annotations lazy
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ...logging_config import get_logger
from .LinkValidator import LinkValidator
from .ValidationFailure import ValidationFailure

logger = get_logger("docs.visitor")

# Autolink kinds passed to auto_link()
LINK_TYPE_NORMAL = 1
LINK_TYPE_EMAIL = 2

# Table cell alignment flags passed to the table cell handlers
TABLE_ALIGNMENT_LEFT = 1
TABLE_ALIGNMENT_RIGHT = 2
TABLE_ALIGNMENT_CENTER = 3


class DocumentVisitor:
    """Renderer callbacks for one markdown file.

    The markdown pipeline calls one handler per element with the output
    buffer ``out``. Container handlers get a ``text`` continuation that renders
    their children and returns whether anything was written. Leaf handlers get
    their children already rendered. Only ``normal_text`` writes to ``out``;
    everything else is discarded, and explicit links are handed to the
    validator.

    A visitor is bound to a single file and must not be reused.
    """

    def __init__(self, path: Path, validator: LinkValidator):
        self.path = path
        self.validator = validator
        self.failures: list[ValidationFailure] = []
        self.links_checked = 0

    # Block-level callbacks

    def block_code(self, out: bytearray, text: bytes, lang: str) -> None:
        pass

    def block_quote(self, out: bytearray, text: bytes) -> None:
        pass

    def block_html(self, out: bytearray, text: bytes) -> None:
        pass

    def header(self, out: bytearray, text: Callable[[], bool], level: int, id: str) -> None:
        self._advance(out, text)

    def hrule(self, out: bytearray) -> None:
        pass

    def list(self, out: bytearray, text: Callable[[], bool], flags: int) -> None:
        self._advance(out, text)

    def list_item(self, out: bytearray, text: bytes, flags: int) -> None:
        pass

    def paragraph(self, out: bytearray, text: Callable[[], bool]) -> None:
        self._advance(out, text)

    def table(self, out: bytearray, header: bytes, body: bytes, column_data: list[int]) -> None:
        pass

    def table_row(self, out: bytearray, text: bytes) -> None:
        pass

    def table_header_cell(self, out: bytearray, text: bytes, flags: int) -> None:
        pass

    def table_cell(self, out: bytearray, text: bytes, flags: int) -> None:
        pass

    def footnotes(self, out: bytearray, text: Callable[[], bool]) -> None:
        self._advance(out, text)

    def footnote_item(self, out: bytearray, name: bytes, text: bytes, flags: int) -> None:
        pass

    def title_block(self, out: bytearray, text: bytes) -> None:
        pass

    # Span-level callbacks

    def auto_link(self, out: bytearray, link: bytes, kind: int) -> None:
        logger.debug("[%s] found autolink: %s", self.path, link.decode("utf-8", "replace"))

    def code_span(self, out: bytearray, text: bytes) -> None:
        pass

    def double_emphasis(self, out: bytearray, text: bytes) -> None:
        pass

    def emphasis(self, out: bytearray, text: bytes) -> None:
        pass

    def image(self, out: bytearray, link: bytes, title: bytes, alt: bytes) -> None:
        pass

    def line_break(self, out: bytearray) -> None:
        pass

    def link(self, out: bytearray, link: bytes, title: bytes, content: bytes) -> None:
        href = link.decode("utf-8", "replace")
        logger.debug("[%s] found link: %r", self.path, href)
        self.links_checked += 1
        failures = self.validator.check_link(
            self.path,
            content.decode("utf-8", "replace"),
            title.decode("utf-8", "replace"),
            href,
        )
        for failure in failures:
            logger.warning("%s", failure)
        self.failures.extend(failures)

    def raw_html_tag(self, out: bytearray, tag: bytes) -> None:
        pass

    def triple_emphasis(self, out: bytearray, text: bytes) -> None:
        pass

    def strikethrough(self, out: bytearray, text: bytes) -> None:
        pass

    def footnote_ref(self, out: bytearray, ref: bytes, id: int) -> None:
        pass

    # Low-level callbacks

    def entity(self, out: bytearray, entity: bytes) -> None:
        pass

    def normal_text(self, out: bytearray, text: bytes) -> None:
        logger.debug("[%s] found text: %s", self.path, text.decode("utf-8", "replace"))
        out.extend(text)

    # Header and footer

    def document_header(self, out: bytearray) -> None:
        pass

    def document_footer(self, out: bytearray) -> None:
        pass

    def _advance(self, out: bytearray, text: Callable[[], bool]) -> None:
        # Empty containers must not leave partial output behind
        marker = len(out)
        if not text():
            del out[marker:]
