"""
Shared fixtures for VIN Check backend tests.
"""
import pytest
import sys
import os

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Force env vars so Settings doesn't pick up a developer's .env
os.environ.setdefault("NORMALIZE_INPUT", "false")
os.environ.setdefault("DEBUG", "false")


@pytest.fixture
def honda_vin():
    """2003 Honda Accord, check digit 3."""
    return "1HGCM82633A004352"


@pytest.fixture
def x_check_vin():
    """VIN whose checksum remainder is 10 (check character X)."""
    return "1M8GDM9AXKP042788"


@pytest.fixture
def tesla_vin():
    """Letter at position 7, so the model year falls in the 2010-2039 cycle."""
    return "5YJ3E1EA2KF317000"
