"""Docs check API command.

CLI: doccheck docs check [ROOT]
"""

from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from ..config.DocsConfig import DocsConfig
from ..StageResult import StageResult
from .errors import DocCheckError
from .Reporter import Reporter
from .TreeWalker import TreeWalker

logger = get_logger("docs.check")


def cmd_check(root: str | None = None, source_root: str | None = None) -> StageResult:
    """Check every markdown link under ``root`` (defaults to the configured root)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        reporter = Reporter()
        root_path = Path(root) if root else None
        try:
            overrides = {"source_root": Path(source_root).expanduser()} if source_root else {}
            config = DocsConfig.default(**overrides)
            root_path = root_path or Path(config.root)

            yield (0.2, f"Walking {root_path}...")
            walker = TreeWalker(config)
            for outcome in walker.walk(root_path):
                reporter.add(outcome)
                yield (0.5, f"Checked {outcome.path} ({outcome.links_checked} links)")
        except (DocCheckError, ValueError) as exc:
            logger.error("Documentation check aborted: %s", exc)
            reporter.fatal(exc)
        except Exception as exc:
            logger.exception("Unexpected error while walking %s", root_path)
            reporter.fatal(RuntimeError(f"Unexpected error while walking {root_path}: {exc}"))

        yield (1.0, "Complete")
        result_obj.output = {
            "root": str(root_path or ""),
            "passed": reporter.passed,
            "files_checked": reporter.files_checked,
            "links_checked": reporter.links_checked,
            "failures": [failure.to_dict() for failure in reporter.failures],
            "errors": reporter.errors,
            "warnings": [] if reporter.outcomes or reporter.errors else [f"No markdown files found under {root_path}"],
        }
        result_obj.result = reporter.render()
        result_obj.success = reporter.passed

    return StageResult(
        announce=f"Checking documentation links in {root or 'configured root'}...",
        progress_callback=do_work,
    )
