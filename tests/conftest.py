"""
Pytest configuration and fixtures for fallible tests.
"""

import pytest


@pytest.fixture
def calls() -> list[object]:
    """Side-effect log: steps append their name when they run."""
    return []
