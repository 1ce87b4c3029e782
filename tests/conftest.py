"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from doccheck.api.config.DocsConfig import DocsConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that go through the CLI")
    config.addinivalue_line("markers", "docs: tests of the docs domain")
    config.addinivalue_line("markers", "config: tests of the configuration model")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root`` and return ``root``."""
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


# Links below are relative to the fixture root; see docs_tree
SELF_LINK = "https://github.com/google/cadvisor/blob/master/info/v1/container.go"

DOCS_TREE = {
    "README.md": f"# Docs\n\nSee [the source]({SELF_LINK}) and [the client](client/README.md).\n",
    "client/README.md": "Client docs, [back](../README.md), [struct](#L42).\n",
    "api.md": '[ContainerInfo](../info/v1/container.go#L12 "ContainerInfo struct")\n',
    ".hidden.md": f"[hidden]({SELF_LINK})\n",
    ".git/HEAD.md": f"[git]({SELF_LINK})\n",
    "Godeps/vendor.md": f"[vendored]({SELF_LINK})\n",
    "notes.txt": f"[not markdown]({SELF_LINK})\n",
}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def docs_config() -> DocsConfig:
    """The compiled-in configuration."""
    return DocsConfig.default()


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A small documentation tree with one self link and one untitled line anchor."""
    return write_tree(tmp_path / "docs", DOCS_TREE)


@pytest.fixture
def clean_tree(tmp_path: Path) -> Path:
    """A documentation tree without any link problems."""
    return write_tree(
        tmp_path / "clean",
        {
            "index.md": "[guide](guide/setup.md) and [Go](https://go.dev/doc/)\n",
            "guide/setup.md": "Back to [index](../index.md#top).\n",
        },
    )
