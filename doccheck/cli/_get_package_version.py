"""Get the installed doccheck version (cached)."""

import importlib.metadata

_VERSION_CACHE: str | None = None


def _get_package_version() -> str:
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib.metadata.version("doccheck")
        except importlib.metadata.PackageNotFoundError:
            from doccheck import __version__

            _VERSION_CACHE = __version__
    return _VERSION_CACHE
