"""Pytest configuration for the qos_overrides tests."""

import sys
from pathlib import Path


def pytest_sessionstart(session):
    """Make the package importable without installation."""
    package_root = Path(__file__).resolve().parents[1]
    path_str = str(package_root)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)
