"""Link value dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """An explicit markdown link: ``[content](href "title")``."""

    href: str
    title: str = ""
    content: str = ""
