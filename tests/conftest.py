"""
Pytest configuration and shared fixtures.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used fixtures
3. Isolates tests from MERKLE_* environment variables
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_vectors = importlib.import_module("fixtures.vectors")

EXAMPLE_BLOCKS = _vectors.EXAMPLE_BLOCKS


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def example_blocks():
    """Provide the four literal example blocks."""
    return list(EXAMPLE_BLOCKS)


@pytest.fixture(autouse=True)
def clean_merkle_env(monkeypatch):
    """Strip MERKLE_* variables so local settings do not leak into tests."""
    for name in [
        "MERKLE_HASH_ALGORITHM",
        "MERKLE_HEX_PREFIX",
        "MERKLE_LOG_LEVEL",
        "MERKLE_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)

