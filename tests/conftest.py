"""
Pytest configuration and shared fixtures for UPI codec tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Pins the runtime configuration so env vars cannot leak into tests
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_record = _common.make_record
make_schema = _common.make_schema

from reso_upi.config import UpiConfig, set_default_config


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def default_config():
    """Run every test against a fresh default configuration."""
    config = UpiConfig()
    set_default_config(config)
    yield config
    set_default_config(None)


@pytest.fixture
def sample_record():
    """Provide the reference version 2.0 record."""
    return make_record()


@pytest.fixture
def sample_upi():
    """Provide the reference encoded URN."""
    return _common.SAMPLE_UPI


@pytest.fixture
def v3_schema():
    """Provide a small non-default schema."""
    return make_schema()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
