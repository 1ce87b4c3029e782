"""Walk a documentation tree and check every eligible markdown file."""

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from ..config.DocsConfig import DocsConfig
from .DocumentVisitor import DocumentVisitor
from .errors import DocReadError
from .FileFilter import FileFilter, FilterDecision
from .FileOutcome import FileOutcome
from .LinkValidator import LinkValidator
from .render_markdown import render_markdown

logger = get_logger("docs.walker")


class TreeWalker:
    """Pre-order walk over a root path, names sorted at every level.

    Errors from stat-ing or listing an entry are ignored and the entry is
    skipped. A markdown file that cannot be read raises DocReadError and ends
    the walk.
    """

    def __init__(self, config: DocsConfig, file_filter: FileFilter | None = None):
        self.config = config
        self.file_filter = file_filter or FileFilter(config.ignore, config.markdown_glob)
        self.validator = LinkValidator(config)

    def walk(self, root: Path | str) -> Iterator[FileOutcome]:
        """Yield one FileOutcome per eligible file, in walk order."""
        yield from self._walk(Path(root))

    def _walk(self, path: Path) -> Iterator[FileOutcome]:
        try:
            info = path.lstat()
        except OSError as exc:
            logger.debug("Skipping %s: %s", path, exc)
            return

        is_dir = stat.S_ISDIR(info.st_mode)
        decision = self.file_filter.decide(path.name, is_dir)
        if decision is FilterDecision.CHECK:
            yield self.check_file(path)
            return
        if decision is not FilterDecision.PROCEED:
            logger.debug("Skipping %s (%s)", path, decision.value)
            return

        try:
            names = sorted(os.listdir(path))
        except OSError as exc:
            logger.debug("Cannot list %s: %s", path, exc)
            return
        for name in names:
            yield from self._walk(path / name)

    def check_file(self, path: Path) -> FileOutcome:
        """Parse one markdown file with a fresh visitor and return its outcome.

        Raises:
            DocReadError: If the file cannot be read
        """
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise DocReadError(path, exc) from exc

        logger.info("Checking %s", path)
        visitor = DocumentVisitor(path, self.validator)
        render_markdown(data.decode("utf-8", errors="replace"), visitor)
        return FileOutcome(path=path, links_checked=visitor.links_checked, failures=visitor.failures)
