import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo whatever logging setup a CLI invocation performed."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(logging.WARNING)
