"""
Pytest configuration and shared fixtures for chunktree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import logging
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

from fixtures.common import (  # noqa: E402
    ABCDEFGH,
    ABCDXXGH,
    make_content,
    make_tree,
)

from chunktree.config import set_default_config  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def tree_abcdefgh():
    """Tree over "ABCDEFGH" with 2-byte leaves (4 leaves, height 3)."""
    return make_tree(ABCDEFGH, 2)


@pytest.fixture
def tree_abcdxxgh():
    """Tree over "ABCDXXGH" with 2-byte leaves; only the third chunk differs."""
    return make_tree(ABCDXXGH, 2)


@pytest.fixture
def three_chunk_tree():
    """Tree over 6 bytes with 2-byte leaves (3 chunks, padded to 4)."""
    return make_tree(b"ABCDEF", 2)


@pytest.fixture
def random_content():
    """Factory for seeded pseudo-random content."""
    return make_content


@pytest.fixture(autouse=True)
def _isolate_global_state(monkeypatch):
    """Reset default config and root logging around every test."""
    for name in [
        "CHUNKTREE_LEAF_SIZE",
        "CHUNKTREE_ALGORITHM",
        "CHUNKTREE_LOG_LEVEL",
        "CHUNKTREE_LOG_FILE",
        "CHUNKTREE_OUTPUT_FORMAT",
    ]:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
