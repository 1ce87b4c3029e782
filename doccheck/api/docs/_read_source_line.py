"""Read a single 1-based line from a source file."""

from pathlib import Path


def _read_source_line(path: Path, line_number: int) -> str | None:
    """Return line ``line_number`` of ``path`` without its newline, or None past the end.

    Raises:
        OSError: If the file cannot be read
    """
    if line_number < 1:
        return None
    with path.open(encoding="utf-8", errors="replace") as fh:
        for current, line in enumerate(fh, start=1):
            if current == line_number:
                return line.rstrip("\r\n")
    return None
