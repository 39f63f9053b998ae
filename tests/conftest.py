"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a click runner for invoking the command line group."""
    return CliRunner()
