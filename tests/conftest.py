"""Global pytest configuration.

The package root logger binds its handler to ``sys.stderr`` on first use.
Resetting around every test lets each test bind to its own (possibly captured)
stream instead of one left over from an earlier test.
"""

from __future__ import annotations

import pytest

from multiradix.logging import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()
