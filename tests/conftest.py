"""
Pytest configuration and shared fixtures.

Marks:
    integration -- runs the real setup script, requires sh on PATH

Tests decorated with this mark are skipped automatically when sh is absent
(e.g. native Windows), so the unit test suite always runs cleanly.
"""

import shutil
from unittest.mock import patch

import pytest

from mobilecli.config import Config

# ---------------------------------------------------------------------------
# Dependency detection
# ---------------------------------------------------------------------------

_HAVE_SH = shutil.which("sh") is not None


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("integration") and not _HAVE_SH:
            item.add_marker(pytest.mark.skip(reason="integration deps missing: sh"))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def setup_env():
    """Replace the setup script run with a mock for dispatcher tests."""
    with patch("mobilecli.cli.run_setup_env") as mock_setup:
        yield mock_setup


@pytest.fixture()
def config(tmp_path):
    return Config(
        root=tmp_path,
        values={"tools": {"bundle": "packager bundle", "link": "linker"}},
    )
