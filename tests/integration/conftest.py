"""Fixtures for CLI integration tests."""

import logging

import pytest

from doccheck import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the stderr handler a CLI run installs; it points at the runner's closed stream."""
    yield
    if logging_config._HANDLER is not None:
        logging.getLogger("doccheck").removeHandler(logging_config._HANDLER)
        logging_config._HANDLER = None
    logging.getLogger("doccheck").setLevel(logging.NOTSET)
