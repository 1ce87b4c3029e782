"""Drive a DocumentVisitor over a markdown-it syntax tree."""

from __future__ import annotations

import functools
from collections.abc import Callable

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin

from ...logging_config import get_logger
from .DocumentVisitor import (
    LINK_TYPE_EMAIL,
    LINK_TYPE_NORMAL,
    TABLE_ALIGNMENT_CENTER,
    TABLE_ALIGNMENT_LEFT,
    TABLE_ALIGNMENT_RIGHT,
    DocumentVisitor,
)

logger = get_logger("docs.markdown")

_ALIGNMENTS = {
    "text-align:left": TABLE_ALIGNMENT_LEFT,
    "text-align:right": TABLE_ALIGNMENT_RIGHT,
    "text-align:center": TABLE_ALIGNMENT_CENTER,
}


@functools.lru_cache(maxsize=1)
def markdown_parser() -> MarkdownIt:
    """Markdown parser with the extensions documentation is written against.

    CommonMark already provides fenced code blocks and lets a block start
    without a blank line before it; bare URLs are turned into links by
    linkify, and tables, strikethrough, footnotes and front matter (the title
    block) are enabled on top.

    Link targets are handed over as written: markdown-it normally
    percent-encodes them, which would hide malformed escapes from the
    validator and change the values failures report.
    """
    md = (
        MarkdownIt("commonmark", {"linkify": True})
        .enable(["linkify", "strikethrough", "table"])
        .use(footnote_plugin)
        .use(front_matter_plugin)
    )
    md.normalizeLink = _keep_link  # type: ignore[method-assign]
    return md


def _keep_link(url: str) -> str:
    return url


def render_markdown(content: str, visitor: DocumentVisitor) -> bytes:
    """Parse ``content`` and call ``visitor`` for every element.

    Returns the bytes the visitor left in the output buffer. Callers only
    care about the visitor's side effects.
    """
    tree = SyntaxTreeNode(markdown_parser().parse(content))
    return _Dispatcher(visitor).render(tree)


class _Dispatcher:
    """Map syntax tree node types to visitor callbacks."""

    def __init__(self, visitor: DocumentVisitor):
        self.visitor = visitor
        self._handlers: dict[str, Callable[[SyntaxTreeNode, bytearray], None]] = {
            "heading": self._heading,
            "paragraph": self._paragraph,
            "bullet_list": self._list,
            "ordered_list": self._list,
            "list_item": self._list_item,
            "blockquote": self._blockquote,
            "fence": self._code,
            "code_block": self._code,
            "html_block": self._html_block,
            "hr": self._hr,
            "table": self._table,
            "thead": self._inline,
            "tbody": self._inline,
            "tr": self._table_row,
            "th": self._table_cell,
            "td": self._table_cell,
            "front_matter": self._front_matter,
            "footnote_block": self._footnotes,
            "footnote": self._footnote_item,
            "footnote_anchor": self._skip,
            "inline": self._inline,
            "text": self._text,
            "softbreak": self._softbreak,
            "hardbreak": self._hardbreak,
            "text_special": self._entity,
            "em": self._emphasis,
            "strong": self._strong,
            "s": self._strikethrough,
            "code_inline": self._code_inline,
            "html_inline": self._html_inline,
            "image": self._image,
            "link": self._link,
            "footnote_ref": self._footnote_ref,
        }

    def render(self, tree: SyntaxTreeNode) -> bytes:
        out = bytearray()
        self.visitor.document_header(out)
        self._children(tree, out)
        self.visitor.document_footer(out)
        return bytes(out)

    def _node(self, node: SyntaxTreeNode, out: bytearray) -> None:
        handler = self._handlers.get(node.type)
        if handler is None:
            logger.debug("unhandled markdown node %r, rendering children", node.type)
            self._children(node, out)
            return
        handler(node, out)

    def _children(self, node: SyntaxTreeNode, out: bytearray) -> bool:
        """Render the children of ``node`` into ``out``; True if anything was written."""
        marker = len(out)
        for child in node.children:
            self._node(child, out)
        return len(out) > marker

    def _rendered(self, node: SyntaxTreeNode) -> bytes:
        buf = bytearray()
        self._children(node, buf)
        return bytes(buf)

    def _continuation(self, node: SyntaxTreeNode, out: bytearray) -> Callable[[], bool]:
        return lambda: self._children(node, out)

    # Blocks

    def _heading(self, node: SyntaxTreeNode, out: bytearray) -> None:
        level = int(node.tag[1:]) if node.tag[1:].isdigit() else 1
        self.visitor.header(out, self._continuation(node, out), level, str(node.attrs.get("id", "")))

    def _paragraph(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.paragraph(out, self._continuation(node, out))

    def _list(self, node: SyntaxTreeNode, out: bytearray) -> None:
        flags = 1 if node.type == "ordered_list" else 0
        self.visitor.list(out, self._continuation(node, out), flags)

    def _list_item(self, node: SyntaxTreeNode, out: bytearray) -> None:
        flags = 1 if node.parent is not None and node.parent.type == "ordered_list" else 0
        self.visitor.list_item(out, self._rendered(node), flags)

    def _blockquote(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.block_quote(out, self._rendered(node))

    def _code(self, node: SyntaxTreeNode, out: bytearray) -> None:
        lang = node.info.strip().split(" ")[0] if node.info else ""
        self.visitor.block_code(out, node.content.encode("utf-8"), lang)

    def _html_block(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.block_html(out, node.content.encode("utf-8"))

    def _hr(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.hrule(out)

    def _table(self, node: SyntaxTreeNode, out: bytearray) -> None:
        header = b""
        body = b""
        columns: list[int] = []
        for section in node.children:
            if section.type == "thead":
                header = self._rendered(section)
                for row in section.children[:1]:
                    columns = [_ALIGNMENTS.get(str(cell.attrs.get("style", "")), 0) for cell in row.children]
            elif section.type == "tbody":
                body = self._rendered(section)
        self.visitor.table(out, header, body, columns)

    def _table_row(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.table_row(out, self._rendered(node))

    def _table_cell(self, node: SyntaxTreeNode, out: bytearray) -> None:
        flags = _ALIGNMENTS.get(str(node.attrs.get("style", "")), 0)
        if node.type == "th":
            self.visitor.table_header_cell(out, self._rendered(node), flags)
        else:
            self.visitor.table_cell(out, self._rendered(node), flags)

    def _front_matter(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.title_block(out, node.content.encode("utf-8"))

    def _footnotes(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.footnotes(out, self._continuation(node, out))

    def _footnote_item(self, node: SyntaxTreeNode, out: bytearray) -> None:
        meta = node.meta or {}
        name = str(meta.get("label") or meta.get("id", ""))
        self.visitor.footnote_item(out, name.encode("utf-8"), self._rendered(node), 0)

    def _skip(self, node: SyntaxTreeNode, out: bytearray) -> None:
        pass

    # Spans

    def _inline(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self._children(node, out)

    def _text(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.normal_text(out, node.content.encode("utf-8"))

    def _softbreak(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.normal_text(out, b"\n")

    def _hardbreak(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.line_break(out)

    def _entity(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.entity(out, node.markup.encode("utf-8"))

    def _emphasis(self, node: SyntaxTreeNode, out: bytearray) -> None:
        children = node.children
        if len(children) == 1 and children[0].type == "strong":
            self.visitor.triple_emphasis(out, self._rendered(children[0]))
        else:
            self.visitor.emphasis(out, self._rendered(node))

    def _strong(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.double_emphasis(out, self._rendered(node))

    def _strikethrough(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.strikethrough(out, self._rendered(node))

    def _code_inline(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.code_span(out, node.content.encode("utf-8"))

    def _html_inline(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.raw_html_tag(out, node.content.encode("utf-8"))

    def _image(self, node: SyntaxTreeNode, out: bytearray) -> None:
        self.visitor.image(
            out,
            str(node.attrs.get("src", "")).encode("utf-8"),
            str(node.attrs.get("title", "") or "").encode("utf-8"),
            node.content.encode("utf-8"),
        )

    def _link(self, node: SyntaxTreeNode, out: bytearray) -> None:
        href = str(node.attrs.get("href", ""))
        if node.info == "auto":
            kind = LINK_TYPE_EMAIL if href.startswith("mailto:") else LINK_TYPE_NORMAL
            self.visitor.auto_link(out, href.encode("utf-8"), kind)
            return
        title = str(node.attrs.get("title", "") or "")
        self.visitor.link(out, href.encode("utf-8"), title.encode("utf-8"), self._rendered(node))

    def _footnote_ref(self, node: SyntaxTreeNode, out: bytearray) -> None:
        meta = node.meta or {}
        label = str(meta.get("label") or "")
        self.visitor.footnote_ref(out, label.encode("utf-8"), int(meta.get("id", 0)))
