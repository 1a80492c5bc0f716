"""
Shared test fixtures and configuration.
"""

import pytest
from click.testing import CliRunner

from gox_platforms.platform import PLATFORMS_LATEST, PlatformSnapshot


@pytest.fixture
def runner() -> CliRunner:
    """Return a click test runner."""
    return CliRunner()


@pytest.fixture
def latest() -> PlatformSnapshot:
    """Return the newest platform snapshot."""
    return PLATFORMS_LATEST
