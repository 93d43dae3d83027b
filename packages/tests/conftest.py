"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Iterator

import pytest

# The snapdemo testing plugin is registered via a ``pytest11`` entry
# point for external consumers.  Our own suite disables it
# (``-p no:snapdemo``) and loads it here so that the snapdemo import
# chain is measured by coverage.
pytest_plugins = ["snapdemo.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture
def _restore_root_logger() -> Iterator[None]:
    """Save and restore root logger handlers and level.

    Keeps tests that call ``configure_logging()`` (directly or via the
    CLI) from leaking handlers into later tests.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for h in root.handlers:
        if h not in original_handlers:
            h.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
