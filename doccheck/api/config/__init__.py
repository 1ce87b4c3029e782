"""Static configuration for doccheck."""

from .DocsConfig import DocsConfig

__all__ = ["DocsConfig"]
