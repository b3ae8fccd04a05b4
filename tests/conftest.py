"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def posts():
    """Posts with nested authors and comments, as plain mappings."""
    return [
        {
            "id": 1,
            "title": "First",
            "author": {"id": 7, "name": "Ann"},
            "comments": [{"id": 10, "body": "nice"}, {"id": 11, "body": "meh"}],
        },
        {
            "id": 2,
            "title": "Second",
            "author": {"id": 8, "name": "Bob"},
            "comments": [],
        },
    ]


@pytest.fixture(autouse=True)
def reset_responder_logger():
    """Drop handlers installed by configure_logging during a test."""
    yield

    logger = logging.getLogger("responder")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
