"""Docs API domain: markdown link validation."""

from .cmd_check import cmd_check
from .DocumentVisitor import DocumentVisitor
from .errors import DocCheckError, DocReadError, GlobPatternError
from .FileFilter import FileFilter, FilterDecision
from .FileOutcome import FileOutcome
from .Link import Link
from .LinkValidator import LinkValidator
from .render_markdown import render_markdown
from .Reporter import Reporter
from .TreeWalker import TreeWalker
from .ValidationFailure import ValidationFailure

__all__ = [
    "DocCheckError",
    "DocReadError",
    "DocumentVisitor",
    "FileFilter",
    "FileOutcome",
    "FilterDecision",
    "GlobPatternError",
    "Link",
    "LinkValidator",
    "Reporter",
    "TreeWalker",
    "ValidationFailure",
    "cmd_check",
    "render_markdown",
]
