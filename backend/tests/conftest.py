"""Pytest configuration shared by all test suites.

Puts backend/src on the import path so tests import modules the same way
the scripts do (``from infrastructure.ftp import ...``).
"""

import sys
from pathlib import Path

import pytest

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test so env overrides take effect."""
    from config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
