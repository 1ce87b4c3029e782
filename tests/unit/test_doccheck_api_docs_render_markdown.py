"""Unit tests for doccheck.api.docs.render_markdown module."""

from pathlib import Path

import pytest

from doccheck.api.docs.DocumentVisitor import DocumentVisitor
from doccheck.api.docs.Link import Link
from doccheck.api.docs.LinkValidator import (
    REASON_MALFORMED,
    REASON_NEEDS_TITLE,
    REASON_NO_EXPECTATION,
    REASON_SHOULD_BE_RELATIVE,
    LinkValidator,
)
from doccheck.api.docs.render_markdown import markdown_parser, render_markdown

pytestmark = pytest.mark.docs

SELF_LINK = "https://github.com/google/cadvisor/blob/master/x.go"


class RecordingValidator:
    def __init__(self):
        self.links = []

    def check_link(self, path, text, title, href):
        self.links.append(Link(href=href, title=title, content=text))
        return []


@pytest.fixture
def visitor(docs_config) -> DocumentVisitor:
    return DocumentVisitor(Path("doc.md"), LinkValidator(docs_config))


def test_parser_is_shared():
    assert markdown_parser() is markdown_parser()


def test_explicit_link_in_paragraph(visitor):
    render_markdown(f"See [x]({SELF_LINK}).\n", visitor)
    assert visitor.links_checked == 1
    assert [f.reason for f in visitor.failures] == [REASON_SHOULD_BE_RELATIVE]


def test_link_title_reaches_validator(visitor):
    render_markdown('[a](#L7 "Unregistered Title") [b](#L8 "ContainerInfo struct")\n', visitor)
    assert visitor.links_checked == 2
    assert [f.reason for f in visitor.failures] == [REASON_NO_EXPECTATION]


def test_link_content_and_title():
    validator = RecordingValidator()
    render_markdown('[plain text](guide.md "Guide title")\n', DocumentVisitor(Path("doc.md"), validator))
    assert len(validator.links) == 1
    link = validator.links[0]
    assert (link.href, link.title, link.content) == ("guide.md", "Guide title", "plain text")


def test_links_in_nested_structures_are_all_checked(visitor):
    text = (
        "# Heading [h](#L1)\n"
        "\n"
        "- item [a](#L2)\n"
        "- item *[b](#L3)*\n"
        "\n"
        "> quote [c](#L4)\n"
        "\n"
        "| col |\n"
        "| --- |\n"
        "| [d](#L5) |\n"
        "\n"
        "Footnote ref[^1].\n"
        "\n"
        "[^1]: note [e](#L6)\n"
    )
    render_markdown(text, visitor)
    assert visitor.links_checked == 6
    assert [f.value for f in visitor.failures] == ["#L1", "#L2", "#L3", "#L4", "#L5", "#L6"]
    assert {f.reason for f in visitor.failures} == {REASON_NEEDS_TITLE}


def test_code_is_not_checked(visitor):
    text = f"```\n[x]({SELF_LINK})\n```\n\n    [y]({SELF_LINK})\n\nInline `[z]({SELF_LINK})` code.\n"
    render_markdown(text, visitor)
    assert visitor.links_checked == 0
    assert visitor.failures == []


def test_bare_and_angle_bracket_urls_are_not_validated(visitor):
    render_markdown(f"Visit {SELF_LINK} now or <{SELF_LINK}>.\n", visitor)
    assert visitor.links_checked == 0
    assert visitor.failures == []


def test_blocks_do_not_need_a_blank_line_before_them(visitor):
    text = "Intro\n- [a](#L1)\n\nMore\n```\n[x](#L2)\n```\n"
    render_markdown(text, visitor)
    assert [f.value for f in visitor.failures] == ["#L1"]


def test_images_and_front_matter_are_ignored(visitor):
    text = f"---\ntitle: [x]({SELF_LINK})\n---\n\n![logo]({SELF_LINK}.png)\n"
    render_markdown(text, visitor)
    assert visitor.links_checked == 0


def test_raw_html_is_ignored(visitor):
    render_markdown(f'<div><a href="{SELF_LINK}">x</a></div>\n', visitor)
    assert visitor.links_checked == 0


def test_only_text_reaches_the_output(visitor):
    assert render_markdown("hello world\n", visitor) == b"hello world"
    assert render_markdown("***\n", visitor) == b""
    assert render_markdown("- one\n- two\n", visitor) == b""


class TestHrefsAsWritten:
    @pytest.mark.parametrize(
        "href",
        [
            "%zz",
            "guide/dóc.md#L3",
            "https://github.com/google/cadvisor/blob/master/dóc.md",
            "http://[::1/x",
            "a%20b.md?q=1&r=2",
        ],
    )
    def test_href_reaches_validator_unchanged(self, href):
        validator = RecordingValidator()
        render_markdown(f"[x]({href})\n", DocumentVisitor(Path("doc.md"), validator))
        assert [link.href for link in validator.links] == [href]

    def test_bad_percent_escape_is_malformed(self, visitor):
        render_markdown("[x](%zz)\n", visitor)
        assert [f.reason for f in visitor.failures] == [REASON_MALFORMED]
        assert visitor.failures[0].value.startswith("%zz (")

    def test_unclosed_bracketed_host_is_malformed(self, visitor):
        render_markdown("[x](http://[::1/x)\n", visitor)
        assert [f.reason for f in visitor.failures] == [REASON_MALFORMED]
        assert visitor.failures[0].value.startswith("http://[::1/x (")

    def test_non_ascii_self_link_is_reported_as_written(self, visitor):
        href = "https://github.com/google/cadvisor/blob/master/dóc.md"
        render_markdown(f"[x]({href})\n", visitor)
        assert [(f.reason, f.value) for f in visitor.failures] == [(REASON_SHOULD_BE_RELATIVE, href)]
