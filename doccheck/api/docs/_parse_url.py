"""Strict URL parsing for link targets."""

import re
from urllib.parse import SplitResult, urlsplit

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _parse_url(href: str) -> SplitResult:
    """Split ``href`` into its URL parts.

    ``urlsplit`` accepts almost anything, so the problems it lets through are
    rejected here: control characters, broken percent escapes, a missing
    scheme in front of ``:`` and a non-numeric port.

    Raises:
        ValueError: If ``href`` is not a valid URL
    """
    if _CONTROL_CHARS.search(href):
        raise ValueError("invalid control character in URL")
    if href.startswith(":"):
        raise ValueError("missing protocol scheme")

    parts = urlsplit(href)

    if _BAD_ESCAPE.search(parts.netloc) or _BAD_ESCAPE.search(parts.path) or _BAD_ESCAPE.search(parts.fragment):
        raise ValueError("invalid URL escape")
    if parts.netloc:
        # Accessing .port validates it
        parts.port  # noqa: B018
    return parts
