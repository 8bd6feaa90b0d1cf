"""Shared fixtures for the rect_clip test suite."""

import pytest

from rect_clip.core.primitives import Rectangle
from rect_clip.utils import logging_config


@pytest.fixture()
def window() -> Rectangle:
    """The 100x100 reference window used throughout the scenarios."""
    return Rectangle(100.0, 100.0, 200.0, 200.0)


@pytest.fixture()
def reset_logging():
    """Drop handlers and context installed by setup_logging() after a test."""
    yield
    logging_config.setup_logging(to_stderr=False, capture_warnings=False)
    logging_config.pop_context()
