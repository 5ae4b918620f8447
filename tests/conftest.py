"""Pytest configuration and shared fixtures for release check tests."""

import sys
from pathlib import Path

import pytest

# Add the action/ directory to sys.path so we can import check
ACTION_DIR = Path(__file__).parent.parent / "action"
sys.path.insert(0, str(ACTION_DIR))

import descriptor  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def clean_pkg():
    """Path to the clean R package fixture."""
    return FIXTURES_DIR / "clean-pkg"


@pytest.fixture
def problematic_pkg():
    """Path to the problematic R package fixture."""
    return FIXTURES_DIR / "problematic-pkg"


@pytest.fixture
def clean_desc(clean_pkg):
    """Loaded descriptor for the clean package."""
    return descriptor.load_package(clean_pkg)


@pytest.fixture
def problematic_desc(problematic_pkg):
    """Loaded descriptor for the problematic package."""
    return descriptor.load_package(problematic_pkg)
